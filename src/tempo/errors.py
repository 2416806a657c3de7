"""Exception types raised while parsing and decoding templates."""

from __future__ import annotations

from typing import Sequence

__all__ = [
    "TempoError",
    "ParseError",
    "DocumentPayloadError",
    "RegionOrderError",
]


class TempoError(Exception):
    """Base class for user-facing template errors."""


class ParseError(TempoError, ValueError):
    """Raised when a template cannot be segmented into a document."""

    def __init__(
        self,
        message: str,
        *,
        reason: str = "invalid_template",
        offset: int | None = None,
    ) -> None:
        super().__init__(message)
        self.reason = reason
        self.offset = offset

    def details(self) -> dict[str, str | int | None]:
        return {
            "reason": self.reason,
            "offset": self.offset,
            "message": str(self),
        }


class DocumentPayloadError(TempoError, ValueError):
    """Raised when a serialized document payload fails schema validation."""

    def __init__(self, message: str, *, errors: Sequence[str] = ()) -> None:
        super().__init__(message)
        self.errors: tuple[str, ...] = tuple(errors)


class RegionOrderError(RuntimeError):
    """Internal invariant violation: regions regressed or overlapped mid-pipeline."""
