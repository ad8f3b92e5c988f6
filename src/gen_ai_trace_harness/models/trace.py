"""
Trace types: a trace is an ordered list of spans, a batch is a list of traces.
"""

from typing import Any, Dict, List, Sequence, Union

from .span import Span

Trace = List[Span]

SpanLike = Union[Span, Dict[str, Any]]


def to_span(span: SpanLike) -> Span:
    """Return ``span`` as a :class:`Span`, validating raw Zipkin dictionaries."""
    if isinstance(span, Span):
        return span
    return Span.model_validate(span)


def parse_trace(spans: Sequence[SpanLike]) -> Trace:
    """Validate one trace worth of raw spans."""
    return [to_span(span) for span in spans]


def parse_traces(raw_traces: Sequence[Sequence[SpanLike]]) -> List[Trace]:
    """
    Validate a raw Zipkin ``/api/v2/traces`` response.

    Args:
        raw_traces: List of traces, each a list of span dictionaries

    Returns:
        List of traces of Span objects, in the given order
    """
    return [parse_trace(spans) for spans in raw_traces]
