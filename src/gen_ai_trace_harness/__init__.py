"""
GenAI Trace Harness - Polling, validation and summarization of GenAI traces for acceptance tests.

This package provides tools and utilities for:
- Waiting for asynchronously exported traces to arrive in a trace store
- Classifying spans tagged with OpenTelemetry GenAI semantic conventions
- Aggregating model calls, token usage, tool calls and errors into a summary
- Checking trace invariants such as trace id contiguity and span durations
- Rendering summaries as human-readable reports for test output
"""

__version__ = "0.1.0"

from .models import (
    Span,
    SpanKind,
    Endpoint,
    Annotation,
    Trace,
    TokenUsage,
    TraceSummary,
    parse_traces,
)
from .errors import (
    TraceHarnessError,
    TracePollTimeoutError,
    TraceValidationError,
    ContiguityViolationError,
    DurationViolationError,
    SpanNameViolationError,
)
from .classifier import SpanClassification, classify_span, resolve_model_name
from .summary_builder import TraceSummaryBuilder, build_trace_summary
from .poller import TracePoller, await_non_empty
from .validator import TraceValidator, check_contiguity, check_durations, check_span_names
from .report import format_summary, format_trace_dump
from .config import HarnessConfig
from .sources.interfaces import TraceSourceConnector
from .sources.zipkin import ZipkinConnector, ZipkinConfig
from .harness import TraceHarness

__all__ = [
    "Span",
    "SpanKind",
    "Endpoint",
    "Annotation",
    "Trace",
    "TokenUsage",
    "TraceSummary",
    "parse_traces",
    # Errors
    "TraceHarnessError",
    "TracePollTimeoutError",
    "TraceValidationError",
    "ContiguityViolationError",
    "DurationViolationError",
    "SpanNameViolationError",
    # Aggregation
    "SpanClassification",
    "classify_span",
    "resolve_model_name",
    "TraceSummaryBuilder",
    "build_trace_summary",
    # Polling and validation
    "TracePoller",
    "await_non_empty",
    "TraceValidator",
    "check_contiguity",
    "check_durations",
    "check_span_names",
    # Reporting
    "format_summary",
    "format_trace_dump",
    # Wiring
    "HarnessConfig",
    "TraceSourceConnector",
    "ZipkinConnector",
    "ZipkinConfig",
    "TraceHarness",
]
