"""
Shared fixtures for trace harness tests.
"""

import itertools
import os
from typing import Any, Dict, Optional

import pytest

from gen_ai_trace_harness.config import HarnessConfig
from gen_ai_trace_harness.harness import TraceHarness
from gen_ai_trace_harness.models import Span


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: tests that talk to a live Zipkin server")


class FakeClock:
    """Deterministic clock whose sleep advances time instantly."""

    def __init__(self, start: float = 0.0):
        self.now = start
        self.sleeps = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def fake_clock():
    """A fake monotonic clock starting at zero."""
    return FakeClock()


@pytest.fixture
def make_span():
    """Factory building Span objects with sensible defaults."""
    ids = itertools.count(1)

    def _make_span(name: str = "span", tags: Optional[Dict[str, str]] = None,
                   duration: Optional[int] = 1000, trace_id: str = "trace-1", **extra: Any) -> Span:
        data: Dict[str, Any] = {
            "id": f"{next(ids):016x}",
            "traceId": trace_id,
            "name": name,
            "timestamp": 1_700_000_000_000_000,
            "duration": duration,
            "tags": tags or {},
        }
        data.update(extra)
        return Span.model_validate(data)

    return _make_span


@pytest.fixture
def chat_tags():
    """Factory for the tags of a chat (LLM) span."""
    def _chat_tags(model: str = "gpt-4o", input_tokens: str = "10", output_tokens: str = "20",
                   total_tokens: str = "30") -> Dict[str, str]:
        return {
            "gen_ai.operation.name": "chat",
            "gen_ai.response.model": model,
            "gen_ai.usage.input_tokens": input_tokens,
            "gen_ai.usage.output_tokens": output_tokens,
            "gen_ai.usage.total_tokens": total_tokens,
        }

    return _chat_tags


@pytest.fixture(scope="session")
def harness_config():
    """Harness configuration from the environment, skipping when Zipkin is not configured."""
    if not os.getenv("ZIPKIN_BASE_URL"):
        pytest.skip("ZIPKIN_BASE_URL environment variable not set")
    return HarnessConfig.from_env()


@pytest.fixture(scope="session")
def trace_harness(harness_config):
    """One harness for the whole test run, closed when the run ends."""
    with TraceHarness.from_config(harness_config) as harness:
        yield harness
