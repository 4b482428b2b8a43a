"""Exceptions raised when a card fails its validity check."""

from __future__ import annotations

__all__ = ["InvalidCardError", "InvalidRankError", "InvalidSuitError"]


class InvalidCardError(ValueError):
    """Base class for cards whose fields fall outside the standard ranges."""

    def __init__(self, value: int, message: str) -> None:
        super().__init__(message)
        self.value = value


class InvalidRankError(InvalidCardError):
    def __init__(self, value: int) -> None:
        super().__init__(value, f"invalid card value: {value}")


class InvalidSuitError(InvalidCardError):
    def __init__(self, value: int) -> None:
        super().__init__(value, f"invalid card suit: {value}")
