"""Enumerated CSS properties used in VML styles."""

from __future__ import annotations

import enum
from typing import Optional


class Position(enum.Enum):
    """The CSS 'position' property."""

    STATIC = "static"
    ABSOLUTE = "absolute"
    RELATIVE = "relative"

    @classmethod
    def decode(cls, text) -> Optional["Position"]:
        """Member for text, or None when the text is unknown."""
        try:
            return cls(text)
        except ValueError:
            return None

    def __str__(self) -> str:
        return self.value


class Visibility(enum.Enum):
    """The CSS 'visibility' property."""

    INHERIT = "inherit"
    HIDDEN = "hidden"
    VISIBLE = "visible"
    COLLAPSE = "collapse"

    @classmethod
    def decode(cls, text) -> Optional["Visibility"]:
        """Member for text, or None when the text is unknown."""
        try:
            return cls(text)
        except ValueError:
            return None

    def __str__(self) -> str:
        return self.value