"""ErrorCode — failure taxonomy reported through return values."""

from __future__ import annotations

from enum import Enum


class ErrorCode(Enum):
    """Outcome codes reported through return values instead of exceptions."""

    SUCCESS = 0
    INVALID_TIME = 1
    INVALID_BIT_COUNT = 2
    MISSING_INPUT = 3
    SYSTEM_TIME = 4
    NOT_FOUND = 5

    def describe(self) -> str:
        """Human-readable description of the code."""
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    ErrorCode.SUCCESS: "Operation completed successfully",
    ErrorCode.INVALID_TIME: "Invalid time components provided",
    ErrorCode.INVALID_BIT_COUNT: "Bit count out of valid range (1-6)",
    ErrorCode.MISSING_INPUT: "Required input was not provided",
    ErrorCode.SYSTEM_TIME: "System time retrieval failed",
    ErrorCode.NOT_FOUND: "Registration not found",
}
