"""Enumerated attributes of VML strokes."""

from __future__ import annotations

from typing import Optional

from .attributes import AttributeEnum


class StrokeArrowLength(AttributeEnum):
    """ST_StrokeArrowLength."""

    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


class StrokeArrowType(AttributeEnum):
    """ST_StrokeArrowType."""

    NONE = "none"
    BLOCK = "block"
    CLASSIC = "classic"
    OVAL = "oval"
    DIAMOND = "diamond"
    OPEN = "open"


class StrokeArrowWidth(AttributeEnum):
    """ST_StrokeArrowWidth."""

    NARROW = "narrow"
    MEDIUM = "medium"
    WIDE = "wide"


class StrokeDashStyle(AttributeEnum):
    """Dash pattern of a stroke; decoding ignores letter case."""

    SOLID = "solid"
    SHORT_DASH = "shortdash"
    SHORT_DOT = "shortdot"
    SHORT_DASH_DOT = "shortdashdot"
    SHORT_DASH_DOT_DOT = "shortdashdotdot"
    DOT = "dot"
    DASH = "dash"
    LONG_DASH = "longdash"
    DASH_DOT = "dashdot"
    LONG_DASH_DOT = "longdashdot"
    LONG_DASH_DOT_DOT = "longdashdotdot"

    @classmethod
    def decode(cls, text) -> Optional["StrokeDashStyle"]:
        """Member for text in any letter case, or None when unknown."""
        if not isinstance(text, str):
            return None
        return super().decode(text.lower())


class StrokeEndCap(AttributeEnum):
    """ST_StrokeEndCap."""

    FLAT = "flat"
    SQUARE = "square"
    ROUND = "round"


class StrokeJoinStyle(AttributeEnum):
    """ST_StrokeJoinStyle."""

    ROUND = "round"
    BEVEL = "bevel"
    MITER = "miter"


class StrokeLineStyle(AttributeEnum):
    """ST_StrokeLineStyle."""

    SINGLE = "single"
    THIN_THIN = "thinThin"
    THIN_THICK = "thinThick"
    THICK_THIN = "thickThin"
    THICK_BETWEEN_THIN = "thickBetweenThin"