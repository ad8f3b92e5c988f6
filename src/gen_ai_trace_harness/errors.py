"""
Exception types raised by the trace harness.

Polling and validation failures are always surfaced to the caller. Fetch
failures are whatever the underlying trace source raises and are never
wrapped here.
"""

from typing import Optional


class TraceHarnessError(Exception):
    """Base class for all trace harness errors."""


class TracePollTimeoutError(TraceHarnessError, TimeoutError):
    """Raised when no non-empty trace batch arrived before the deadline."""

    def __init__(self, elapsed_seconds: float, timeout_seconds: float, attempts: int):
        self.elapsed_seconds = elapsed_seconds
        self.timeout_seconds = timeout_seconds
        self.attempts = attempts
        super().__init__(
            f"No traces became available after {elapsed_seconds:.2f}s "
            f"(timeout {timeout_seconds:.2f}s, {attempts} fetch attempt(s))"
        )


class TraceValidationError(TraceHarnessError, AssertionError):
    """Base class for invariant violations found in a fetched trace."""


class ContiguityViolationError(TraceValidationError):
    """Raised when spans of one trace do not share the same trace id."""

    def __init__(self, expected_trace_id: str, actual_trace_id: str, span_index: int):
        self.expected_trace_id = expected_trace_id
        self.actual_trace_id = actual_trace_id
        self.span_index = span_index
        super().__init__(
            f"Span at index {span_index} has traceId '{actual_trace_id}', "
            f"expected '{expected_trace_id}'"
        )


class DurationViolationError(TraceValidationError):
    """Raised when a span reports a negative duration."""

    def __init__(self, span_name: str, duration: int, span_id: Optional[str] = None):
        self.span_name = span_name
        self.duration = duration
        self.span_id = span_id
        super().__init__(
            f"Span '{span_name}' (id={span_id}) has negative duration {duration}us"
        )


class SpanNameViolationError(TraceValidationError):
    """Raised when a span has no usable name."""

    def __init__(self, span_id: Optional[str], span_index: int):
        self.span_id = span_id
        self.span_index = span_index
        super().__init__(f"Span at index {span_index} (id={span_id}) has a blank name")
