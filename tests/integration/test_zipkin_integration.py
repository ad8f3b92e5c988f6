"""
Integration tests for TraceHarness against a live Zipkin server.

These tests expect an agent server to have exported GenAI traces to Zipkin
within the configured lookback window.

Run with: ZIPKIN_BASE_URL=http://localhost:9411 pytest tests/integration -m integration -v
"""

import pytest

from gen_ai_trace_harness.report import format_summary


@pytest.mark.integration
class TestZipkinIntegration:
    """Integration tests using real Zipkin data."""

    def test_connection_to_zipkin(self, trace_harness):
        """Test that we can connect to Zipkin."""
        assert trace_harness.connector.test_connection() is True, "Failed to connect to Zipkin"

    def test_await_recent_traces(self, trace_harness):
        """Test that recent traces arrive and satisfy the trace invariants."""
        traces = trace_harness.await_traces()

        assert traces, "At least one trace should be recorded in Zipkin"
        assert traces[0], "Trace should contain at least one span"

        trace_harness.validate(traces)

    def test_summary_of_recent_traces(self, trace_harness):
        """Test that recent traces summarize consistently."""
        traces, summary = trace_harness.collect()

        assert summary.trace_count == len(traces)
        assert summary.tool_call_count == len(summary.tool_names)
        assert summary.error_count == len(summary.error_span_names)
        assert "TRACE SUMMARY" in format_summary(summary)
