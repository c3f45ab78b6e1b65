"""Domain error codes for theater billing."""

from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    PLAY_NOT_FOUND = "PLAY_NOT_FOUND"
    UNKNOWN_PLAY_TYPE = "UNKNOWN_PLAY_TYPE"


class BillingError(Exception):
    """Base billing error with code and message."""

    def __init__(self, code: ErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class PlayNotFoundError(BillingError, LookupError):
    """Raised when a performance references a play id missing from the catalog."""

    def __init__(self, play_id: str) -> None:
        super().__init__(
            code=ErrorCode.PLAY_NOT_FOUND,
            message=f"unknown play id: {play_id}",
        )
        self.play_id = play_id


class UnknownPlayTypeError(BillingError, ValueError):
    """Raised when a play's type has no pricing rule."""

    def __init__(self, play_type: str) -> None:
        super().__init__(
            code=ErrorCode.UNKNOWN_PLAY_TYPE,
            message=f"unknown type: {play_type}",
        )
        self.play_type = play_type
