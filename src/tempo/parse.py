"""Segment template text into a :class:`~tempo.ast.Document`.

The pipeline runs in fixed order, each stage consuming the previous stage's
output in full:

1. scan the input for ``<% ... %>`` directives,
2. fill the gaps between directives with literal text regions,
3. drop zero-length regions,
4. trim the delimiter markers off code regions,
5. copy each region out of the input and build the document items.

Emptiness is judged before trimming, so ``<%%>`` still yields an empty code
item while two back-to-back directives produce no text item between them.
"""

from __future__ import annotations

import logging
import re
from typing import List, Sequence

from .ast import CLOSE_MARKER, OPEN_MARKER, PRINT_SIGIL, CodeItem, Document, Item, TextItem
from .core.ranges import Region, RegionKind
from .errors import ParseError, RegionOrderError

LOGGER = logging.getLogger(__name__)

# Shortest match so the first closing marker ends the directive.
_CODE_BLOCK_RE = re.compile(re.escape(OPEN_MARKER) + r".*?" + re.escape(CLOSE_MARKER), re.DOTALL)


def parse(text: str, *, strict: bool = False) -> Document:
    """Parse ``text`` into a document of text and code items.

    In the default lenient mode every input succeeds: an opening marker that
    never closes is left in place as literal text. With ``strict=True`` such a
    marker raises :class:`ParseError` instead and no document is returned.
    """

    if not isinstance(text, str):
        raise TypeError(f"Template input must be str, not {type(text).__name__}")

    code_regions = scan_code_regions(text)
    ensure_non_overlapping(code_regions)

    regions = fill_text_gaps(code_regions, len(text))
    regions = remove_empty_regions(regions)
    if strict:
        _ensure_terminated(text, regions)
    regions = trim_code_delimiters(regions)

    document = build_items(text, regions)
    LOGGER.debug(
        "Parsed template (chars=%d, code=%d, items=%d)",
        len(text),
        len(code_regions),
        len(document),
    )
    return document


parse_str = parse


def scan_code_regions(text: str) -> List[Region]:
    """Return the untrimmed code regions of ``text`` in left-to-right order."""

    return [Region.code(match.start(), match.end()) for match in _CODE_BLOCK_RE.finditer(text)]


def ensure_non_overlapping(regions: Sequence[Region]) -> None:
    """Raise :class:`ParseError` when ``regions`` overlap or are out of order."""

    previous: Region | None = None
    for region in regions:
        if previous is not None and region.start < previous.end:
            raise ParseError(
                f"Code region {region.to_tuple()} overlaps {previous.to_tuple()}",
                reason="overlapping_regions",
                offset=region.start,
            )
        previous = region


def fill_text_gaps(code_regions: Sequence[Region], length: int) -> List[Region]:
    """Interleave text regions so the result covers ``[0, length)`` contiguously."""

    if not code_regions:
        return [Region.text(0, length)]

    regions: List[Region] = []
    cursor = 0
    for region in code_regions:
        if region.start < cursor:
            raise RegionOrderError(f"Region {region.to_tuple()} starts before offset {cursor}")
        if region.start > cursor:
            regions.append(Region.text(cursor, region.start))
        regions.append(region)
        cursor = region.end

    # Text after the last directive.
    if cursor < length:
        regions.append(Region.text(cursor, length))
    return regions


def remove_empty_regions(regions: Sequence[Region]) -> List[Region]:
    return [region for region in regions if not region.is_empty]


def trim_code_delimiters(regions: Sequence[Region]) -> List[Region]:
    """Strip ``<%`` and ``%>`` from code regions, leaving text regions untouched."""

    return [
        region.shrink(before=len(OPEN_MARKER), after=len(CLOSE_MARKER)) if region.is_code else region
        for region in regions
    ]


def build_items(text: str, regions: Sequence[Region]) -> Document:
    """Copy each region out of ``text`` and wrap it in a document item."""

    items: List[Item] = []
    for region in regions:
        fragment = region.slice_of(text)
        if region.kind is RegionKind.TEXT:
            items.append(TextItem(fragment))
            continue
        print_result = fragment.startswith(PRINT_SIGIL)
        if print_result:
            fragment = fragment[len(PRINT_SIGIL) :]
        items.append(CodeItem(fragment, print_result))
    return Document(items=items)


def _ensure_terminated(text: str, regions: Sequence[Region]) -> None:
    for region in regions:
        if region.is_code:
            continue
        index = text.find(OPEN_MARKER, region.start, region.end)
        if index != -1:
            LOGGER.debug("Unterminated directive at offset %d", index)
            raise ParseError(
                f"Unterminated code directive at offset {index}",
                reason="unterminated_delimiter",
                offset=index,
            )


__all__ = [
    "build_items",
    "ensure_non_overlapping",
    "fill_text_gaps",
    "parse",
    "parse_str",
    "remove_empty_regions",
    "scan_code_regions",
    "trim_code_delimiters",
]
