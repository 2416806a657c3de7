"""Document tree produced by the template parser."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, Union

from jsonschema import Draft7Validator, ValidationError

from .errors import DocumentPayloadError

OPEN_MARKER = "<%"
CLOSE_MARKER = "%>"
PRINT_SIGIL = "="


class ItemKind(str, Enum):
    """Discriminator for document items."""

    TEXT = "text"
    CODE = "code"


@dataclass(slots=True, frozen=True)
class TextItem:
    """A run of literal text emitted verbatim by a renderer."""

    content: str

    @property
    def kind(self) -> ItemKind:
        return ItemKind.TEXT

    def to_template(self) -> str:
        return self.content

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "content": self.content}


@dataclass(slots=True, frozen=True)
class CodeItem:
    """A code directive with the delimiters and print sigil removed.

    ``print_result`` asks the renderer to splice the evaluated value into the
    output at this position; otherwise the code runs for its side effects only.
    """

    source: str
    print_result: bool = False

    @property
    def kind(self) -> ItemKind:
        return ItemKind.CODE

    def to_template(self) -> str:
        sigil = PRINT_SIGIL if self.print_result else ""
        return f"{OPEN_MARKER}{sigil}{self.source}{CLOSE_MARKER}"

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "source": self.source, "print_result": self.print_result}


Item = Union[TextItem, CodeItem]


DOCUMENT_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "required": ["items"],
    "properties": {
        "items": {
            "type": "array",
            "items": {
                "anyOf": [
                    {
                        "type": "object",
                        "properties": {
                            "kind": {"const": ItemKind.TEXT.value},
                            "content": {"type": "string"},
                        },
                        "required": ["kind", "content"],
                        "additionalProperties": False,
                    },
                    {
                        "type": "object",
                        "properties": {
                            "kind": {"const": ItemKind.CODE.value},
                            "source": {"type": "string"},
                            "print_result": {"type": "boolean"},
                        },
                        "required": ["kind", "source"],
                        "additionalProperties": False,
                    },
                ]
            },
        },
    },
    "additionalProperties": False,
}

_DOCUMENT_VALIDATOR = Draft7Validator(DOCUMENT_SCHEMA)


@dataclass(slots=True)
class Document:
    """Ordered sequence of items in document order."""

    items: list[Item] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.items = list(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)

    def __getitem__(self, index: int) -> Item:
        return self.items[index]

    @classmethod
    def from_items(cls, items: Iterable[Item]) -> Document:
        return cls(items=list(items))

    @property
    def code_items(self) -> list[CodeItem]:
        """Return the code directives in document order."""

        return [item for item in self.items if isinstance(item, CodeItem)]

    def to_template(self) -> str:
        """Re-serialize the document using the fixed delimiter syntax."""

        return "".join(item.to_template() for item in self.items)

    def to_payload(self) -> dict[str, Any]:
        """Return a JSON-friendly representation of the document."""

        return {"items": [item.to_dict() for item in self.items]}

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> Document:
        """Rebuild a document from :meth:`to_payload` output, validating its shape."""

        if not isinstance(payload, Mapping):
            raise DocumentPayloadError("Document payload must be a mapping")
        errors = sorted(
            _DOCUMENT_VALIDATOR.iter_errors(dict(payload)),
            key=lambda err: [str(part) for part in err.path],
        )
        if errors:
            messages = [_format_validation_error(error) for error in errors]
            raise DocumentPayloadError(
                f"Invalid document payload: {messages[0]}",
                errors=messages,
            )
        items: list[Item] = []
        for entry in payload["items"]:
            if entry["kind"] == ItemKind.TEXT.value:
                items.append(TextItem(entry["content"]))
            else:
                items.append(CodeItem(entry["source"], bool(entry.get("print_result", False))))
        return cls(items=items)


def _format_validation_error(error: ValidationError) -> str:
    path = ".".join(str(part) for part in error.path)
    if path:
        return f"{path}: {error.message}"
    return error.message


__all__ = [
    "CLOSE_MARKER",
    "CodeItem",
    "DOCUMENT_SCHEMA",
    "Document",
    "Item",
    "ItemKind",
    "OPEN_MARKER",
    "PRINT_SIGIL",
    "TextItem",
]
