"""
Post-hoc invariant checks over a fetched trace.

Violations raise assertion-style errors so that a test fails with a
diagnosable message. They are not meant to be caught and suppressed.
"""

from typing import Sequence
import logging

from .errors import ContiguityViolationError, DurationViolationError, SpanNameViolationError
from .models import SpanLike, to_span


def check_contiguity(spans: Sequence[SpanLike]) -> None:
    """
    Verify every span of a trace shares the first span's trace id.

    Traces with zero or one span trivially pass.

    Raises:
        ContiguityViolationError: On the first span with a different trace id
    """
    if len(spans) <= 1:
        return
    expected = to_span(spans[0]).trace_id
    for index, raw_span in enumerate(spans[1:], start=1):
        actual = to_span(raw_span).trace_id
        if actual != expected:
            raise ContiguityViolationError(expected, actual, index)


def check_durations(spans: Sequence[SpanLike]) -> None:
    """
    Verify no span reports a negative duration. Spans without a duration pass.

    Raises:
        DurationViolationError: On the first negative duration
    """
    for raw_span in spans:
        span = to_span(raw_span)
        if span.duration is not None and span.duration < 0:
            raise DurationViolationError(span.display_name, span.duration, span.id)


def check_span_names(spans: Sequence[SpanLike]) -> None:
    """
    Verify every span carries a non-blank name.

    Raises:
        SpanNameViolationError: On the first unnamed span
    """
    for index, raw_span in enumerate(spans):
        span = to_span(raw_span)
        if not (span.name or "").strip():
            raise SpanNameViolationError(span.id, index)


class TraceValidator:
    """Runs all invariant checks over traces."""

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    def validate_trace(self, spans: Sequence[SpanLike]) -> None:
        """Run every check against a single trace."""
        check_span_names(spans)
        check_durations(spans)
        check_contiguity(spans)

    def validate(self, traces: Sequence[Sequence[SpanLike]]) -> None:
        """Run every check against each trace of a batch."""
        for index, spans in enumerate(traces):
            self.logger.debug(f"Validating trace {index} with {len(spans)} span(s)")
            self.validate_trace(spans)
