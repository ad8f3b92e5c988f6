"""
Unit tests for the Zipkin connector, with the HTTP session mocked out.
"""

from datetime import datetime, timezone
from unittest import mock

import pytest
import requests

from gen_ai_trace_harness.sources.utils import calculate_lookback_millis, to_epoch_millis
from gen_ai_trace_harness.sources.zipkin import ZipkinConfig, ZipkinConnector

RAW_TRACES = [
    [
        {"id": "1", "traceId": "abc", "name": "chat", "duration": 10,
         "tags": {"gen_ai.operation.name": "chat"}},
        {"id": "2", "traceId": "abc", "parentId": "1", "name": "tool"},
    ]
]


def make_response(payload=None, status_error=None):
    response = mock.Mock()
    response.json.return_value = payload
    if status_error is not None:
        response.raise_for_status.side_effect = status_error
    return response


@pytest.fixture
def session():
    return mock.Mock(spec=requests.Session)


@pytest.fixture
def connector(session):
    config = ZipkinConfig(base_url="http://zipkin:9411/", service_name="agent", timeout_seconds=3,
                          lookback_seconds=60, limit=5)
    return ZipkinConnector(config, session=session)


class TestZipkinConnector:
    """Test cases for querying Zipkin."""

    def test_query_traces_parses_spans(self, connector, session):
        session.get.return_value = make_response(RAW_TRACES)

        traces = connector.query_traces()

        assert len(traces) == 1
        assert [span.id for span in traces[0]] == ["1", "2"]
        assert traces[0][1].parent_id == "1"

    def test_query_parameters(self, connector, session):
        """Test the request uses the v2 traces endpoint and configured defaults."""
        session.get.return_value = make_response([])

        with mock.patch("gen_ai_trace_harness.sources.zipkin.now_millis", return_value=1_000_000):
            connector.query_traces()

        url = session.get.call_args.args[0]
        kwargs = session.get.call_args.kwargs
        assert url == "http://zipkin:9411/api/v2/traces"
        assert kwargs["params"] == {"endTs": 1_000_000, "lookback": 60_000, "limit": 5, "serviceName": "agent"}
        assert kwargs["timeout"] == 3

    def test_query_since_and_overrides(self, connector, session):
        """Test that ``since`` narrows the lookback window."""
        session.get.return_value = make_response([])

        with mock.patch("gen_ai_trace_harness.sources.zipkin.now_millis", return_value=1_000_000):
            connector.query_traces(service_name="other", since=990.0, limit=1)

        params = session.get.call_args.kwargs["params"]
        assert params["lookback"] == 10_000
        assert params["serviceName"] == "other"
        assert params["limit"] == 1

    def test_http_errors_propagate(self, connector, session):
        """Test that query failures are raised rather than reported as no traces."""
        session.get.return_value = make_response(status_error=requests.HTTPError("503 Server Error"))

        with pytest.raises(requests.HTTPError):
            connector.query_traces()

    def test_connection_errors_propagate(self, connector, session):
        session.get.side_effect = requests.ConnectionError("refused")

        with pytest.raises(requests.ConnectionError):
            connector.query_traces()

    def test_get_trace(self, connector, session):
        session.get.return_value = make_response(RAW_TRACES[0])

        trace = connector.get_trace("abc")

        assert session.get.call_args.args[0] == "http://zipkin:9411/api/v2/trace/abc"
        assert len(trace) == 2

    def test_test_connection(self, connector, session):
        session.get.return_value = make_response(["agent"])

        assert connector.test_connection() is True

    def test_test_connection_failure(self, connector, session):
        session.get.side_effect = requests.ConnectionError("refused")

        assert connector.test_connection() is False

    def test_fetcher_binds_query_arguments(self, connector, session):
        """Test the zero-argument fetch operation handed to the poller."""
        session.get.return_value = make_response(RAW_TRACES)

        fetch = connector.fetcher(since=0)
        traces = fetch()

        assert len(traces) == 1
        assert session.get.call_args.kwargs["params"]["serviceName"] == "agent"

    def test_close_closes_session(self, connector, session):
        connector.close()

        session.close.assert_called_once_with()


class TestSourceUtils:
    """Test cases for query window helpers."""

    def test_to_epoch_millis_from_seconds(self):
        assert to_epoch_millis(1.5) == 1500

    def test_to_epoch_millis_naive_datetime_is_utc(self):
        naive = datetime(1970, 1, 1, 0, 0, 2)
        aware = datetime(1970, 1, 1, 0, 0, 2, tzinfo=timezone.utc)

        assert to_epoch_millis(naive) == to_epoch_millis(aware) == 2000

    def test_default_lookback(self):
        assert calculate_lookback_millis(10_000, None, 60) == 60_000

    def test_lookback_never_below_one(self):
        assert calculate_lookback_millis(1_000, 5.0, 60) == 1
