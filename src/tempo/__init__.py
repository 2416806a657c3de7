"""Parse ``<% ... %>`` templates into an ordered document of text and code items."""

from .ast import CodeItem, Document, Item, ItemKind, TextItem
from .errors import DocumentPayloadError, ParseError, RegionOrderError, TempoError
from .parse import parse, parse_str

__all__ = [
    "CodeItem",
    "Document",
    "DocumentPayloadError",
    "Item",
    "ItemKind",
    "ParseError",
    "RegionOrderError",
    "TempoError",
    "TextItem",
    "parse",
    "parse_str",
]
