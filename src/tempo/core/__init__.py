"""Core offset types shared by the parsing pipeline."""

from .ranges import Region, RegionKind

__all__ = ["Region", "RegionKind"]
