"""
Reduces a batch of traces into a single TraceSummary.
"""

from typing import Sequence
import logging

from .classifier import (
    TAG_INPUT_TOKENS,
    TAG_OUTPUT_TOKENS,
    TAG_TOTAL_TOKENS,
    classify_span,
    parse_token_count,
)
from .models import SpanLike, TokenUsage, TraceSummary, to_span


class TraceSummaryBuilder:
    """
    Folds span classification and token accumulation over a batch of traces.

    Traces and spans are processed in the given order, which fixes the
    insertion order of the model mapping and of the tool and error name lists.
    Each call to :meth:`build` starts from a fresh summary.
    """

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    def build(self, traces: Sequence[Sequence[SpanLike]]) -> TraceSummary:
        """
        Build a summary by aggregating across all traces.

        Args:
            traces: List of traces, each a list of Span objects or raw span dictionaries

        Returns:
            A new TraceSummary
        """
        summary = TraceSummary(trace_count=len(traces))

        for spans in traces:
            for raw_span in spans:
                span = to_span(raw_span)
                classification = classify_span(span)
                tags = span.tags

                if classification.is_llm_call:
                    summary.model_call_count += 1
                    summary.total_llm_duration_micros += span.duration or 0

                    usage = summary.token_usage_by_model.get(classification.model)
                    if usage is None:
                        usage = TokenUsage()
                        summary.token_usage_by_model[classification.model] = usage
                    usage.accumulate(
                        parse_token_count(tags.get(TAG_INPUT_TOKENS)),
                        parse_token_count(tags.get(TAG_OUTPUT_TOKENS)),
                        parse_token_count(tags.get(TAG_TOTAL_TOKENS)),
                    )

                if classification.is_tool_call:
                    summary.tool_call_count += 1
                    summary.tool_names.append(classification.tool_name)

                if classification.is_error:
                    summary.error_count += 1
                    summary.error_span_names.append(span.display_name)

        self.logger.debug(
            f"Summarized {summary.trace_count} trace(s): {summary.model_call_count} model call(s), "
            f"{summary.tool_call_count} tool call(s), {summary.error_count} error(s)"
        )
        return summary


def build_trace_summary(traces: Sequence[Sequence[SpanLike]]) -> TraceSummary:
    """Build a TraceSummary for ``traces`` with a fresh builder."""
    return TraceSummaryBuilder().build(traces)
