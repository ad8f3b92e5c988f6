"""
Composition of trace polling, validation and summarization for acceptance tests.

A TraceHarness is created once per test run and handed to every test that
needs to inspect the traces exported by the agent server.
"""

from typing import List, Optional, Tuple
import logging

from .config import HarnessConfig
from .models import Trace, TraceSummary
from .poller import TracePoller
from .report import format_summary, format_trace_dump
from .sources.interfaces import TraceSourceConnector
from .sources.utils import Timestamp
from .sources.zipkin import ZipkinConnector
from .summary_builder import TraceSummaryBuilder
from .validator import TraceValidator


class TraceHarness:
    """
    Waits for exported traces, then validates and summarizes them.
    """

    def __init__(self, connector: TraceSourceConnector, poller: TracePoller,
                 service_name: Optional[str] = None):
        """
        Initialize the TraceHarness.

        Args:
            connector: Source connector implementing TraceSourceConnector interface
            poller: Poller controlling the wait for traces to arrive
            service_name: Optional service to restrict trace queries to
        """
        self.connector = connector
        self.poller = poller
        self.service_name = service_name
        self.builder = TraceSummaryBuilder()
        self.validator = TraceValidator()
        self.logger = logging.getLogger(self.__class__.__name__)

    @classmethod
    def from_config(cls, config: HarnessConfig) -> "TraceHarness":
        """Create a harness backed by a Zipkin connector."""
        return cls(
            connector=ZipkinConnector(config.to_zipkin_config()),
            poller=TracePoller(config.poll_interval_seconds, config.poll_timeout_seconds),
            service_name=config.service_name,
        )

    def await_traces(self, since: Optional[Timestamp] = None) -> List[Trace]:
        """
        Poll the trace source until at least one trace is available.

        Args:
            since: Only consider traces recorded after this time, e.g. the test start

        Raises:
            TracePollTimeoutError: If no trace arrived before the poll timeout
        """
        fetch = self.connector.fetcher(service_name=self.service_name, since=since)
        return list(self.poller.await_non_empty(fetch))

    def validate(self, traces: List[Trace]) -> None:
        """Run every invariant check on every trace."""
        self.validator.validate(traces)

    def summarize(self, traces: List[Trace]) -> TraceSummary:
        """Build a summary and log its report."""
        summary = self.builder.build(traces)
        self.logger.info("\n" + format_summary(summary))
        return summary

    def collect(self, since: Optional[Timestamp] = None) -> Tuple[List[Trace], TraceSummary]:
        """
        Await, summarize and validate traces.

        The summary is logged before validation so it is visible even when
        a validation check fails.

        Returns:
            Tuple of the fetched traces and their summary
        """
        traces = self.await_traces(since)
        self.logger.debug("\n" + format_trace_dump(traces))
        summary = self.summarize(traces)
        self.validate(traces)
        return traces, summary

    def close(self) -> None:
        self.connector.close()

    def __enter__(self) -> "TraceHarness":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
