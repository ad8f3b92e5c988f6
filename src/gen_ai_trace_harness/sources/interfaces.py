"""
Interfaces for trace source connectors.
"""

from abc import ABC, abstractmethod
from typing import Callable, List, Optional, TYPE_CHECKING

from .utils import Timestamp

if TYPE_CHECKING:
    from ..models import Trace


class TraceSourceConnector(ABC):
    """Abstract interface for source connectors that provide trace data."""

    @abstractmethod
    def query_traces(self, service_name: Optional[str] = None, since: Optional[Timestamp] = None,
                     limit: Optional[int] = None) -> List["Trace"]:
        """
        Query traces recorded by the trace store.

        Failures of the query itself must be raised, not reported as an
        empty result, so callers can tell "no traces yet" from "query failed".

        Args:
            service_name: Optional service to restrict the query to
            since: Only return traces recorded after this time
            limit: Maximum number of traces to return

        Returns:
            List of traces, each a list of Span objects
        """
        pass

    @abstractmethod
    def test_connection(self) -> bool:
        """
        Test the connection to the data source.

        Returns:
            True if connection successful, False otherwise
        """
        pass

    def fetcher(self, service_name: Optional[str] = None, since: Optional[Timestamp] = None,
                limit: Optional[int] = None) -> Callable[[], List["Trace"]]:
        """Return a zero-argument fetch operation suitable for a TracePoller."""
        def fetch() -> List["Trace"]:
            return self.query_traces(service_name=service_name, since=since, limit=limit)
        return fetch

    def close(self) -> None:
        """Release any resources held by the connector."""
