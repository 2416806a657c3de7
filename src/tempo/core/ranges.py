"""Structured helpers for representing tagged spans of template input."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class RegionKind(str, Enum):
    """Classification of a span of template input."""

    TEXT = "text"
    CODE = "code"


@dataclass(slots=True, frozen=True)
class Region:
    """Half-open ``[start, end)`` interval into the input, tagged with its kind.

    Regions never copy the input; they are pipeline-local views that the item
    builder resolves with :meth:`slice_of` once every stage has run.
    """

    start: int
    end: int
    kind: RegionKind = RegionKind.TEXT

    def __post_init__(self) -> None:
        start = self._coerce_index(self.start, "start")
        end = self._coerce_index(self.end, "end")
        if end < start:
            raise ValueError(f"Region end ({end}) precedes start ({start})")
        object.__setattr__(self, "start", start)
        object.__setattr__(self, "end", end)
        object.__setattr__(self, "kind", RegionKind(self.kind))

    @staticmethod
    def _coerce_index(value: Any, label: str) -> int:
        try:
            number = int(value)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Region {label} must be an integer") from exc
        if number < 0:
            raise ValueError(f"Region {label} must be non-negative")
        return number

    @property
    def is_empty(self) -> bool:
        """Return ``True`` when the region covers no characters."""

        return self.start == self.end

    @property
    def is_code(self) -> bool:
        return self.kind is RegionKind.CODE

    def shrink(self, *, before: int = 0, after: int = 0) -> Region:
        """Return a new region narrowed by ``before``/``after`` characters."""

        return Region(start=self.start + max(0, before), end=self.end - max(0, after), kind=self.kind)

    def slice_of(self, text: str) -> str:
        """Return the substring of ``text`` covered by this region."""

        return text[self.start : self.end]

    def to_tuple(self) -> tuple[int, int]:
        """Return the region bounds as a ``(start, end)`` tuple."""

        return (self.start, self.end)

    @classmethod
    def text(cls, start: int, end: int) -> Region:
        return cls(start, end, RegionKind.TEXT)

    @classmethod
    def code(cls, start: int, end: int) -> Region:
        return cls(start, end, RegionKind.CODE)


__all__ = ["Region", "RegionKind"]
