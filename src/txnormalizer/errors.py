"""Exceptions raised while normalizing an exchange export."""

from __future__ import annotations


class NormalizeError(Exception):
    """Base class for txnormalizer errors."""


class ParseError(NormalizeError):
    """A single row could not be turned into a NormalizedRecord.

    The underlying error (bad timestamp, missing column, ...) is chained as
    ``__cause__``. The pipeline logs it and moves on to the next row.
    """

    def __init__(self, exchange: str, message: str) -> None:
        super().__init__(f"{exchange}: {message}")
        self.exchange = exchange
        self.message = message


class UnknownExchangeError(NormalizeError, KeyError):
    """The exchange identifier has no registered parser."""

    def __init__(self, exchange: str, supported: list[str]) -> None:
        super().__init__(exchange)
        self.exchange = exchange
        self.supported = supported

    def __str__(self) -> str:
        return f"invalid exchange: {self.exchange} (supported: {'|'.join(self.supported)})"


class InputReadError(NormalizeError):
    """The input stream could not be decoded or read as CSV."""
