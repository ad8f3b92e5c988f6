"""
Span model for representing individual Zipkin v2 spans in distributed traces.
"""

from typing import Dict, List, Optional
from datetime import datetime, timedelta, timezone
from enum import Enum
from pydantic import BaseModel, Field, field_validator

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
UNKNOWN_SPAN_NAME = "<unknown>"


class SpanKind(str, Enum):
    """Zipkin span kinds. An absent kind means unset."""
    CLIENT = "CLIENT"
    SERVER = "SERVER"
    PRODUCER = "PRODUCER"
    CONSUMER = "CONSUMER"


class Endpoint(BaseModel):
    """Service identity attached to a span."""
    service_name: Optional[str] = Field(None, alias="serviceName", description="Service name")
    ipv4: Optional[str] = Field(None, description="IPv4 address")
    ipv6: Optional[str] = Field(None, description="IPv6 address")
    port: Optional[int] = Field(None, description="Port number")

    class Config:
        """Pydantic configuration."""
        populate_by_name = True
        extra = "allow"


class Annotation(BaseModel):
    """A timestamped point event recorded on a span."""
    timestamp: int = Field(..., description="Event time in microseconds since epoch")
    value: str = Field(..., description="Event description")


class Span(BaseModel):
    """Represents a single span in a distributed trace."""
    id: str = Field(..., description="Unique identifier for the span")
    trace_id: str = Field(..., alias="traceId", description="Identifier for the trace this span belongs to")
    parent_id: Optional[str] = Field(None, alias="parentId", description="Identifier of the parent span")
    name: Optional[str] = Field(None, description="Name of the span, absent or null when unreported")
    kind: Optional[SpanKind] = Field(None, description="Span kind, absent when unset")
    timestamp: Optional[int] = Field(None, description="Start time in microseconds since epoch")
    # Not constrained to >= 0: negative values are reported by the validator.
    duration: Optional[int] = Field(None, description="Duration of the span in microseconds")
    tags: Dict[str, str] = Field(default_factory=dict, description="Span tags")
    local_endpoint: Optional[Endpoint] = Field(None, alias="localEndpoint")
    remote_endpoint: Optional[Endpoint] = Field(None, alias="remoteEndpoint")
    annotations: List[Annotation] = Field(default_factory=list, description="Point events on the span")

    class Config:
        """Pydantic configuration."""
        populate_by_name = True
        extra = "allow"

    @field_validator("tags", mode="before")
    @classmethod
    def _null_tags_as_empty(cls, value):
        return {} if value is None else value

    @property
    def display_name(self) -> str:
        """Span name for reports, with a placeholder when the name is missing or blank."""
        if self.name is None or not self.name.strip():
            return UNKNOWN_SPAN_NAME
        return self.name

    @property
    def start_time(self) -> Optional[datetime]:
        """Start time as an aware UTC datetime, if the span has a timestamp."""
        if self.timestamp is None:
            return None
        return _EPOCH + timedelta(microseconds=self.timestamp)

    @property
    def end_time(self) -> Optional[datetime]:
        """End time derived from timestamp and duration."""
        start = self.start_time
        if start is None:
            return None
        return start + timedelta(microseconds=self.duration or 0)

    @property
    def duration_ms(self) -> float:
        """Duration in milliseconds, zero when absent."""
        return (self.duration or 0) / 1000.0

    @property
    def service_name(self) -> Optional[str]:
        """Local service name, if reported."""
        return self.local_endpoint.service_name if self.local_endpoint else None
