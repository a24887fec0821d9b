"""Anchor of an Excel client-data object: cell and offset of two corners."""

from __future__ import annotations

import re
from dataclasses import astuple, dataclass, fields

from .number import _parse_int64

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def _parse_integer(text: str) -> int:
    trimmed = text.strip()
    if not _INTEGER_RE.fullmatch(trimmed):
        raise ValueError(f"invalid integer in anchor: {text!r}")
    return _parse_int64(trimmed)


@dataclass
class ClientDataAnchor:
    """Columns, rows and offsets of the top-left and bottom-right corners."""

    left_column: int = 0
    left_offset: int = 0
    top_row: int = 0
    top_offset: int = 0
    right_column: int = 0
    right_offset: int = 0
    bottom_row: int = 0
    bottom_offset: int = 0

    @classmethod
    def parse(cls, text: str) -> "ClientDataAnchor":
        """Decode a comma separated list of numbers.

        Missing trailing numbers stay zero and extra ones are ignored.
        Raises ValueError when an item is not an integer.
        """
        numbers = [_parse_integer(item) for item in text.split(",")]
        names = [item.name for item in fields(cls)]
        return cls(**dict(zip(names, numbers)))

    def __str__(self) -> str:
        return ", ".join(str(number) for number in astuple(self))