"""
Configuration for the trace harness, read from the environment or a .env file.
"""

from dataclasses import dataclass
from typing import Callable, Optional, TypeVar
import os

from dotenv import load_dotenv

from .sources.zipkin import ZipkinConfig

T = TypeVar("T")

DEFAULT_ZIPKIN_BASE_URL = "http://localhost:9411"


def _env(name: str, default: T, cast: Callable[[str], T]) -> T:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return cast(value.strip())
    except ValueError as e:
        raise ValueError(f"Invalid value for {name}: '{value}' ({e})") from e


@dataclass
class HarnessConfig:
    """Settings for polling and summarizing traces."""
    zipkin_base_url: str = DEFAULT_ZIPKIN_BASE_URL
    service_name: Optional[str] = None
    poll_interval_seconds: float = 2.0
    poll_timeout_seconds: float = 30.0
    request_timeout_seconds: float = 10.0
    lookback_seconds: int = 3600
    query_limit: int = 10

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "HarnessConfig":
        """
        Build a configuration from environment variables.

        A .env file is loaded first; variables already set in the
        environment take precedence.

        Args:
            dotenv_path: Optional explicit path to a .env file

        Returns:
            HarnessConfig with defaults for unset variables
        """
        load_dotenv(dotenv_path)
        return cls(
            zipkin_base_url=_env("ZIPKIN_BASE_URL", DEFAULT_ZIPKIN_BASE_URL, str),
            service_name=_env("ZIPKIN_SERVICE_NAME", None, str),
            poll_interval_seconds=_env("TRACE_POLL_INTERVAL_SECONDS", 2.0, float),
            poll_timeout_seconds=_env("TRACE_POLL_TIMEOUT_SECONDS", 30.0, float),
            request_timeout_seconds=_env("ZIPKIN_REQUEST_TIMEOUT_SECONDS", 10.0, float),
            lookback_seconds=_env("ZIPKIN_LOOKBACK_SECONDS", 3600, int),
            query_limit=_env("ZIPKIN_QUERY_LIMIT", 10, int),
        )

    def to_zipkin_config(self) -> ZipkinConfig:
        """Connector-level settings derived from this configuration."""
        return ZipkinConfig(
            base_url=self.zipkin_base_url,
            service_name=self.service_name,
            timeout_seconds=self.request_timeout_seconds,
            lookback_seconds=self.lookback_seconds,
            limit=self.query_limit,
        )
