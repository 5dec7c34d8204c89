# =====================================================================
# File: tokargs_pkg/core/coerce.py
# Value coercion helpers (integers, paths) reporting through the parser
# =====================================================================
from __future__ import annotations
from pathlib import Path
from typing import Callable, TypeVar

from .errors import ParseError
from .parser import Parser

T = TypeVar("T")


def coerce(parser: Parser, text: str, convert: Callable[[str], T]) -> T:
    """Run `convert` on a raw value; failures become a ParseError on the last argument."""
    try:
        return convert(text)
    except (ValueError, TypeError) as exc:
        raise ParseError(parser.last_arg, exc) from exc


def parse_int(parser: Parser, text: str, base: int = 10) -> int:
    return coerce(parser, text, lambda s: int(s, base))


def _to_path(text: str) -> Path:
    if not text:
        raise ValueError("empty path")
    if "\0" in text:
        raise ValueError("embedded null byte")
    return Path(text)


def parse_path(parser: Parser, text: str) -> Path:
    return coerce(parser, text, _to_path)


def value_int(parser: Parser, base: int = 10) -> int:
    return parse_int(parser, parser.value(), base)


def value_path(parser: Parser) -> Path:
    return parse_path(parser, parser.value())
