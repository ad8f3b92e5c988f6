"""
Zipkin connector for retrieving trace data over the Zipkin v2 HTTP API.
"""

from typing import Any, Dict, List, Optional
from dataclasses import dataclass
import logging

import requests

from .interfaces import TraceSourceConnector
from .utils import Timestamp, calculate_lookback_millis, now_millis
from ..models import Trace, parse_traces


@dataclass
class ZipkinConfig:
    """Configuration for a Zipkin connection."""
    base_url: str = "http://localhost:9411"
    service_name: Optional[str] = None
    timeout_seconds: float = 10.0
    lookback_seconds: int = 3600
    limit: int = 10


class ZipkinConnector(TraceSourceConnector):
    """
    Connector for retrieving trace data from a Zipkin server.
    """

    def __init__(self, config: ZipkinConfig, session: Optional[requests.Session] = None):
        """
        Initialize the Zipkin connector.

        Args:
            config: Configuration object for the connection
            session: Optional pre-configured HTTP session
        """
        self.config = config
        self.api_base = f"{config.base_url.rstrip('/')}/api/v2"
        self.session = session or requests.Session()
        self.logger = logging.getLogger(self.__class__.__name__)

    def query_traces(self, service_name: Optional[str] = None, since: Optional[Timestamp] = None,
                     limit: Optional[int] = None) -> List[Trace]:
        """
        Query recent traces from Zipkin.

        Args:
            service_name: Service to restrict the query to, defaults to the configured one
            since: Only return traces recorded after this time (datetime or epoch seconds)
            limit: Maximum number of traces, defaults to the configured limit

        Returns:
            List of traces, each a list of Span objects

        Raises:
            requests.RequestException: If the request fails or Zipkin returns an error status
        """
        end_ms = now_millis()
        params: Dict[str, Any] = {
            "endTs": end_ms,
            "lookback": calculate_lookback_millis(end_ms, since, self.config.lookback_seconds),
            "limit": limit or self.config.limit,
        }
        service = service_name or self.config.service_name
        if service:
            params["serviceName"] = service

        raw_traces = self._get("traces", params)
        traces = parse_traces(raw_traces or [])
        self.logger.debug(f"Zipkin returned {len(traces)} trace(s) for params {params}")
        return traces

    def get_trace(self, trace_id: str) -> Trace:
        """
        Get a single trace by ID.

        Raises:
            requests.HTTPError: If Zipkin has no such trace (404) or fails
        """
        return parse_traces([self._get(f"trace/{trace_id}")])[0]

    def get_services(self) -> List[str]:
        """List service names known to Zipkin."""
        return self._get("services")

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        Execute a GET request against the Zipkin v2 API.

        Args:
            path: Path relative to ``/api/v2``
            params: Query string parameters

        Returns:
            Decoded JSON body
        """
        url = f"{self.api_base}/{path}"
        try:
            response = self.session.get(url, params=params, timeout=self.config.timeout_seconds)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            self.logger.error(f"Error querying Zipkin at {url}: {e}")
            raise

    def test_connection(self) -> bool:
        """
        Test the connection to Zipkin.

        Returns:
            True if connection successful, False otherwise
        """
        try:
            services = self.get_services()
            self.logger.info(f"Connection to Zipkin successful ({len(services)} service(s) known)")
            return True
        except requests.RequestException as e:
            self.logger.error(f"Connection test failed: {e}")
            return False

    def close(self) -> None:
        self.session.close()
