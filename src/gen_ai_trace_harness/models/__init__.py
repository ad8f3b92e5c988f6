"""
Core data models for distributed trace analysis.
"""

from .span import Span, SpanKind, Endpoint, Annotation, UNKNOWN_SPAN_NAME
from .trace import Trace, SpanLike, to_span, parse_trace, parse_traces
from .summary import TokenUsage, TraceSummary

__all__ = [
    "Span",
    "SpanKind",
    "Endpoint",
    "Annotation",
    "UNKNOWN_SPAN_NAME",
    "Trace",
    "SpanLike",
    "to_span",
    "parse_trace",
    "parse_traces",
    # Aggregates
    "TokenUsage",
    "TraceSummary",
]
