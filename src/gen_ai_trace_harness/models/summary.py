"""
Aggregate models produced by folding a batch of traces.
"""

from typing import Dict, List
from pydantic import BaseModel, Field


class TokenUsage(BaseModel):
    """Accumulated token counts for a single model."""
    input_tokens: int = Field(0, ge=0, description="Prompt tokens")
    output_tokens: int = Field(0, ge=0, description="Completion tokens")
    total_tokens: int = Field(0, ge=0, description="Total tokens as reported by the provider")

    def accumulate(self, input_tokens: int, output_tokens: int, total_tokens: int) -> "TokenUsage":
        """Add counts to this usage in place and return it."""
        self.input_tokens += input_tokens
        self.output_tokens += output_tokens
        self.total_tokens += total_tokens
        return self

    def __add__(self, other: "TokenUsage") -> "TokenUsage":
        if not isinstance(other, TokenUsage):
            return NotImplemented
        return TokenUsage(
            input_tokens=self.input_tokens + other.input_tokens,
            output_tokens=self.output_tokens + other.output_tokens,
            total_tokens=self.total_tokens + other.total_tokens,
        )


class TraceSummary(BaseModel):
    """The "receipt" for an agentic run, aggregated over every span of every trace."""
    trace_count: int = Field(0, description="Number of traces in the batch")
    model_call_count: int = Field(0, description="Number of LLM (chat) spans")
    tool_call_count: int = Field(0, description="Number of tool invocation spans")
    error_count: int = Field(0, description="Number of spans flagged as errors")
    total_llm_duration_micros: int = Field(0, description="Summed duration of LLM spans")
    token_usage_by_model: Dict[str, TokenUsage] = Field(
        default_factory=dict,
        description="Token usage per model, in first-seen order"
    )
    tool_names: List[str] = Field(default_factory=list, description="Invoked tools, duplicates kept")
    error_span_names: List[str] = Field(default_factory=list, description="Names of error spans, duplicates kept")

    @property
    def total_llm_duration_seconds(self) -> float:
        return self.total_llm_duration_micros / 1_000_000.0

    def total_token_usage(self) -> TokenUsage:
        """Sum of token usage across all models."""
        total = TokenUsage()
        for usage in self.token_usage_by_model.values():
            total = total + usage
        return total
