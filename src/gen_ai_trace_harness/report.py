"""
Human-readable rendering of trace summaries and raw traces for test output.
"""

from typing import List, Sequence

from .models import SpanLike, TraceSummary, to_span

RULER = "═" * 59
_MODEL_WIDTH = 40
_COUNT_WIDTH = 10


def _row(label: str, input_value: str, output_value: str, total_value: str) -> str:
    return (
        f"    {label:<{_MODEL_WIDTH}} {input_value:>{_COUNT_WIDTH}} "
        f"{output_value:>{_COUNT_WIDTH}} {total_value:>{_COUNT_WIDTH}}"
    )


def _count_row(label: str, input_tokens: int, output_tokens: int, total_tokens: int) -> str:
    return _row(label, f"{input_tokens:,}", f"{output_tokens:,}", f"{total_tokens:,}")


def format_summary(summary: TraceSummary) -> str:
    """
    Produce a fixed-layout summary block suitable for test output.

    Args:
        summary: The summary to render

    Returns:
        Multi-line report ending with a newline
    """
    lines: List[str] = [
        RULER,
        "                   TRACE SUMMARY",
        RULER,
        f"  Traces                : {summary.trace_count}",
        f"  Model calls           : {summary.model_call_count}",
        f"  Tool calls            : {summary.tool_call_count}",
    ]

    if summary.tool_names:
        lines.append(f"  Tools invoked         : {', '.join(summary.tool_names)}")

    lines.append(f"  Errors / Exceptions   : {summary.error_count}")

    if summary.error_span_names:
        lines.append(f"  Error spans           : {', '.join(summary.error_span_names)}")

    lines.append(f"  Total LLM time        : {summary.total_llm_duration_seconds:,.2f} s")
    lines.append("")
    lines.append("  Token Usage by Model:")

    if not summary.token_usage_by_model:
        lines.append("    (no token data recorded)")
    else:
        column_rule = "─" * _COUNT_WIDTH
        lines.append(_row("Model", "Input", "Output", "Total"))
        lines.append(_row("─" * _MODEL_WIDTH, column_rule, column_rule, column_rule))

        for model, usage in summary.token_usage_by_model.items():
            lines.append(_count_row(model, usage.input_tokens, usage.output_tokens, usage.total_tokens))

        if len(summary.token_usage_by_model) > 1:
            total = summary.total_token_usage()
            lines.append(_row("", column_rule, column_rule, column_rule))
            lines.append(_count_row("TOTAL", total.input_tokens, total.output_tokens, total.total_tokens))

    lines.append(RULER)
    return "\n".join(lines) + "\n"


def format_trace_dump(traces: Sequence[Sequence[SpanLike]]) -> str:
    """Render every span of every trace, with its tags, for diagnosis."""
    lines: List[str] = []
    for trace_index, spans in enumerate(traces):
        trace_id = to_span(spans[0]).trace_id if spans else "<empty>"
        lines.append(f"Trace {trace_index} ({trace_id}): {len(spans)} span(s)")
        for raw_span in spans:
            span = to_span(raw_span)
            kind = span.kind.value if span.kind else "UNSET"
            lines.append(
                f"  - {span.display_name} [{kind}] id={span.id} "
                f"parent={span.parent_id or '-'} duration={span.duration_ms:.1f}ms"
            )
            for key in sorted(span.tags):
                lines.append(f"      {key} = {span.tags[key]}")
    return "\n".join(lines) + "\n" if lines else ""
