"""
Unit tests for report rendering.
"""

from gen_ai_trace_harness.models import TokenUsage, TraceSummary
from gen_ai_trace_harness.report import RULER, format_summary, format_trace_dump


class TestFormatSummary:
    """Test cases for the summary report."""

    def test_empty_summary(self):
        report = format_summary(TraceSummary())

        assert report.startswith(RULER + "\n")
        assert report.endswith(RULER + "\n")
        assert "TRACE SUMMARY" in report
        assert "  Traces                : 0\n" in report
        assert "(no token data recorded)" in report
        assert "Tools invoked" not in report
        assert "Error spans" not in report

    def test_counts_and_names(self):
        summary = TraceSummary(
            trace_count=2,
            model_call_count=3,
            tool_call_count=2,
            error_count=1,
            total_llm_duration_micros=1_234_567_890,
            tool_names=["search", "search"],
            error_span_names=["tool search"],
        )

        report = format_summary(summary)

        assert "  Model calls           : 3\n" in report
        assert "  Tools invoked         : search, search\n" in report
        assert "  Errors / Exceptions   : 1\n" in report
        assert "  Error spans           : tool search\n" in report
        assert "  Total LLM time        : 1,234.57 s\n" in report

    def test_single_model_has_no_total_row(self):
        summary = TraceSummary(token_usage_by_model={
            "gpt-4o": TokenUsage(input_tokens=1200, output_tokens=20, total_tokens=1220),
        })

        report = format_summary(summary)

        row = "    " + "gpt-4o".ljust(40) + " " + "1,200".rjust(10) + " " + "20".rjust(10) + " " + "1,220".rjust(10)
        assert row in report.splitlines()
        assert "TOTAL" not in report

    def test_multiple_models_add_total_row(self):
        """Test a totals row is rendered for more than one model, in mapping order."""
        summary = TraceSummary(token_usage_by_model={
            "gpt-4o": TokenUsage(input_tokens=10, output_tokens=20, total_tokens=30),
            "claude": TokenUsage(input_tokens=1, output_tokens=2, total_tokens=3),
        })

        lines = format_summary(summary).splitlines()

        model_lines = [line.split()[0] for line in lines if line.startswith("    ") and line.split()[0] in ("gpt-4o", "claude", "TOTAL")]
        assert model_lines == ["gpt-4o", "claude", "TOTAL"]
        total_line = next(line for line in lines if line.strip().startswith("TOTAL"))
        assert total_line.split()[1:] == ["11", "22", "33"]


class TestFormatTraceDump:
    """Test cases for the per-span trace dump."""

    def test_dump_lists_spans_and_tags(self, make_span):
        traces = [[make_span(name="chat gpt-4o", trace_id="abc", duration=2500, kind="CLIENT",
                             tags={"gen_ai.operation.name": "chat", "a": "1"})]]

        dump = format_trace_dump(traces)

        assert "Trace 0 (abc): 1 span(s)" in dump
        assert "chat gpt-4o [CLIENT]" in dump
        assert "duration=2.5ms" in dump
        assert dump.index("a = 1") < dump.index("gen_ai.operation.name = chat")

    def test_empty_trace(self):
        assert format_trace_dump([[]]) == "Trace 0 (<empty>): 0 span(s)\n"

    def test_no_traces(self):
        assert format_trace_dump([]) == ""
