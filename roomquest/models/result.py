"""
Result envelopes for RoomQuest.

Every engine operation reports through these. They carry plain text
only; rendering is left to the caller.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, Field, model_validator

T = TypeVar("T")


class ServiceResult(BaseModel):
    """Outcome of an operation: a short status plus a detailed narrative."""

    success: bool
    message: str = Field(description="Short status for compact display")
    detailed_output: str = Field(default="", description="Multi-line narrative text")

    @classmethod
    def ok(cls, message: str, detailed_output: str = "") -> ServiceResult:
        return cls(success=True, message=message, detailed_output=detailed_output)

    @classmethod
    def fail(cls, message: str, detailed_output: str = "") -> ServiceResult:
        return cls(success=False, message=message, detailed_output=detailed_output)


class ValueResult(ServiceResult, Generic[T]):
    """A ServiceResult that carries a payload on success."""

    value: T | None = None

    @model_validator(mode="after")
    def check_value_only_on_success(self) -> ValueResult[T]:
        if self.value is not None and not self.success:
            raise ValueError("A failed result cannot carry a value")
        return self

    @classmethod
    def ok_with(cls, value: T, message: str, detailed_output: str = "") -> ValueResult[T]:
        """Create a successful result carrying `value`."""
        return cls(success=True, message=message, detailed_output=detailed_output, value=value)
