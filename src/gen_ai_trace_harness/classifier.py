"""
Classification of individual spans using OpenTelemetry GenAI semantic-convention tags.

Every check is independent: a span can be an LLM call, a tool call and an
error at the same time.
"""

from dataclasses import dataclass
from typing import Mapping, Optional
import logging
import re

from .models import Span

logger = logging.getLogger(__name__)

_TOKEN_COUNT_PATTERN = re.compile(r"[+-]?[0-9]+")

# Distinguishes chat vs tool vs framework operations
TAG_OPERATION_NAME = "gen_ai.operation.name"
# Model actually used for the response (may differ from the requested model)
TAG_RESPONSE_MODEL = "gen_ai.response.model"
TAG_REQUEST_MODEL = "gen_ai.request.model"
TAG_INPUT_TOKENS = "gen_ai.usage.input_tokens"
TAG_OUTPUT_TOKENS = "gen_ai.usage.output_tokens"
TAG_TOTAL_TOKENS = "gen_ai.usage.total_tokens"
# Tool spans may carry this tag without the gen_ai operation marker
TAG_TOOL_NAME = "toolName"
# Presence alone signals a failure
TAG_ERROR = "error"
TAG_OTEL_STATUS_CODE = "otel.status_code"
# "none" when there is no error, otherwise the exception class name
TAG_EXCEPTION = "exception"

OP_CHAT = "chat"
OP_TOOL = "tool"
STATUS_ERROR = "ERROR"
EXCEPTION_NONE = "none"
UNKNOWN_MODEL = "unknown"


@dataclass(frozen=True)
class SpanClassification:
    """Independent classification flags for one span."""
    is_llm_call: bool = False
    is_tool_call: bool = False
    is_error: bool = False
    tool_name: Optional[str] = None
    model: Optional[str] = None


def resolve_model_name(tags: Mapping[str, str]) -> str:
    """
    Resolve the model name of an LLM span.

    Prefers the response model, falling back to the request model when the
    response model is absent or reported as "none".

    Args:
        tags: Span tags

    Returns:
        Model name, or "unknown" when no model tag is usable
    """
    request_model = tags.get(TAG_REQUEST_MODEL)
    model = tags.get(TAG_RESPONSE_MODEL, request_model)
    if model is not None and model.lower() == EXCEPTION_NONE:
        model = request_model
    return model if model is not None else UNKNOWN_MODEL


def is_error_span(tags: Mapping[str, str]) -> bool:
    """Return True if any error signal is present on the span."""
    if TAG_ERROR in tags:
        return True
    if tags.get(TAG_OTEL_STATUS_CODE) == STATUS_ERROR:
        return True
    exception = tags.get(TAG_EXCEPTION)
    return exception is not None and exception.lower() != EXCEPTION_NONE


def parse_token_count(value: Optional[str]) -> int:
    """
    Parse a token count tag value.

    Malformed telemetry must not abort aggregation, so missing, blank,
    unparsable or negative values count as zero.
    """
    if value is None or not value.strip():
        return 0
    # int() alone would also take "1_000" and non-ASCII digits.
    if not _TOKEN_COUNT_PATTERN.fullmatch(value.strip()):
        logger.debug(f"Ignoring unparsable token count '{value}'")
        return 0
    count = int(value.strip())
    if count < 0:
        logger.debug(f"Ignoring negative token count '{value}'")
        return 0
    return count


def classify_span(span: Span) -> SpanClassification:
    """
    Classify a span as LLM call, tool call and/or error.

    Args:
        span: The span to classify

    Returns:
        SpanClassification with each flag evaluated independently
    """
    tags = span.tags
    operation_name = tags.get(TAG_OPERATION_NAME, "")

    is_llm_call = operation_name == OP_CHAT

    tool_tag = tags.get(TAG_TOOL_NAME)
    is_tool_call = operation_name == OP_TOOL or tool_tag is not None

    return SpanClassification(
        is_llm_call=is_llm_call,
        is_tool_call=is_tool_call,
        is_error=is_error_span(tags),
        tool_name=(tool_tag if tool_tag is not None else span.display_name) if is_tool_call else None,
        model=resolve_model_name(tags) if is_llm_call else None,
    )
