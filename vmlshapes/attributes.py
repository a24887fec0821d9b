"""Enumerated VML attributes and how they are written as XML attributes."""

from __future__ import annotations

import enum
from typing import Optional, Tuple


class AttributeEnum(enum.Enum):
    """Base of VML attribute enumerations; a member's value is its text.

    An unset attribute is represented by None and is not written at all.
    """

    @classmethod
    def decode(cls, text) -> Optional["AttributeEnum"]:
        """Member for text, or None when the text is unknown."""
        try:
            return cls(text)
        except ValueError:
            return None

    @classmethod
    def attr_name(cls, name: str) -> str:
        """Attribute name qualified with the namespace prefix of this type."""
        prefix = _PREFIXES.get(cls, "")
        if not prefix or ":" in name:
            return name
        return f"{prefix}:{name}"

    def encode(self, name: str) -> Tuple[str, str]:
        """Qualified attribute name and text for this value."""
        return self.attr_name(name), self.value

    def __str__(self) -> str:
        return self.value


class ConnectType(AttributeEnum):
    """ST_ConnectType, written in the office namespace."""

    NONE = "none"
    RECT = "rect"
    SEGMENTS = "segments"
    CUSTOM = "custom"


class ExtType(AttributeEnum):
    """ST_Ext, written in the VML namespace."""

    EDIT = "edit"
    VIEW = "view"
    BACKWARD_COMPATIBLE = "backwardCompatible"


class FillMethod(AttributeEnum):
    """ST_FillMethod."""

    NONE = "none"
    LINEAR = "linear"
    SIGMA = "sigma"
    ANY = "any"
    LINEAR_SIGMA = "linear sigma"


class FillType(AttributeEnum):
    """ST_FillType."""

    SOLID = "solid"
    GRADIENT = "gradient"
    GRADIENT_RADIAL = "gradientRadial"
    TILE = "tile"
    PATTERN = "pattern"
    FRAME = "frame"


class ImageAspect(AttributeEnum):
    """ST_ImageAspect."""

    IGNORE = "ignore"
    AT_MOST = "atMost"
    AT_LEAST = "atLeast"


class InsetMode(AttributeEnum):
    """ST_InsetMode, written in the office namespace."""

    CUSTOM = "custom"
    AUTO = "auto"


class ObjectType(AttributeEnum):
    """ST_ObjectType."""

    BUTTON = "Button"
    CHECKBOX = "Checkbox"
    DIALOG = "Dialog"
    DROP = "Drop"
    EDIT = "Edit"
    GBOX = "GBox"
    LABEL = "Label"
    LINE_A = "LineA"
    LIST = "List"
    MOVIE = "Movie"
    NOTE = "Note"
    PICT = "Pict"
    RADIO = "Radio"
    RECT_A = "RectA"
    SCROLL = "Scroll"
    SPIN = "Spin"
    SHAPE = "Shape"
    GROUP = "Group"
    RECT = "Rect"


class ShadowType(AttributeEnum):
    """ST_ShadowType."""

    SINGLE = "single"
    DOUBLE = "double"
    EMBOSS = "emboss"
    PERSPECTIVE = "perspective"


_PREFIXES = {
    ConnectType: "o",
    ExtType: "v",
    InsetMode: "o",
}