"""CLI helper to inspect how a template is segmented into items."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Sequence

from ..ast import CodeItem, Document
from ..errors import ParseError
from ..parse import parse
from ..services.settings import OUTPUT_FORMAT_CHOICES, SettingsStore
from ..utils import logging as logging_utils

_LOGGER = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="tempo-inspect",
        description="Parse a <% %> template and print its items.",
    )
    parser.add_argument(
        "--file",
        type=Path,
        help="Template file to parse. Reads stdin when omitted and --text not provided.",
    )
    parser.add_argument("--text", help="Inline template text. Overrides --file when provided.")
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Reject opening markers that are never closed.",
    )
    parser.add_argument(
        "--json",
        dest="output_format",
        action="store_const",
        const="json",
        help="Print the document payload as JSON.",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=OUTPUT_FORMAT_CHOICES,
        help="Output format (default from settings).",
    )
    parser.add_argument("--debug", action="store_true", default=None, help="Enable debug logging.")
    parser.add_argument(
        "--settings",
        type=Path,
        metavar="PATH",
        help="Override the default ~/.tempo/settings.json path.",
    )
    args = parser.parse_args(argv)

    settings = SettingsStore(args.settings).load(
        overrides={
            "strict": args.strict,
            "debug_logging": args.debug,
            "output_format": args.output_format,
        }
    )
    logging_utils.configure_logging(settings.debug_logging, log_dir=settings.log_dir)

    try:
        payload = _load_text(args.text, args.file)
    except (OSError, UnicodeDecodeError) as exc:
        _LOGGER.debug("Could not read template input: %r", exc)
        print(f"error: cannot read template: {exc}", file=sys.stderr)
        return 3
    if not payload:
        print("No template text provided.", file=sys.stderr)
        return 1

    try:
        document = parse(payload, strict=settings.strict)
    except ParseError as exc:
        _LOGGER.debug("Parse failed: %s", exc.details())
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if settings.output_format == "json":
        print(json.dumps(document.to_payload(), indent=2))
    else:
        print(_summarize(document))
    return 0


def _load_text(inline: str | None, path: Path | None) -> str:
    if inline:
        return inline
    if path:
        return path.read_text(encoding="utf-8")
    return sys.stdin.read()


def _summarize(document: Document) -> str:
    lines = [f"items: {len(document)}"]
    for index, item in enumerate(document):
        if isinstance(item, CodeItem):
            marker = "print" if item.print_result else "exec"
            lines.append(f"{index:>3} code[{marker}] {item.source!r}")
        else:
            lines.append(f"{index:>3} text {item.content!r}")
    return "\n".join(lines)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
