"""The VML 'style' attribute: a subset of CSS declarations."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, fields
from typing import Callable, Optional

from .css_enums import Position, Visibility
from .number import Number, _format_float, _parse_int64, make_number

_DECLARATION_RE = re.compile(r"([a-zA-z-]+):([0-9a-zA-Z.\x25-\x2d ]+)")

_TRUE_WORDS = {"true", "t", "1"}
_FALSE_WORDS = {"false", "f", "0"}


def _parse_tristate(text: str) -> Optional[bool]:
    lowered = text.lower()
    if lowered in _TRUE_WORDS:
        return True
    if lowered in _FALSE_WORDS:
        return False
    return None


def _format_tristate(value: Optional[bool]) -> Optional[str]:
    if value is None:
        return None
    return "true" if value else "false"


def _parse_position(text: str) -> Position:
    decoded = Position.decode(text)
    return Position.STATIC if decoded is None else decoded


def _parse_visibility(text: str) -> Visibility:
    decoded = Visibility.decode(text)
    return Visibility.INHERIT if decoded is None else decoded


def _prop(css: str, parse: Callable, fmt: Callable, **kwargs):
    return field(metadata={"css": css, "parse": parse, "format": fmt}, **kwargs)


def _number(css: str):
    return _prop(css, make_number, Number.to_attr, default_factory=Number)


def _tristate(css: str):
    return _prop(css, _parse_tristate, _format_tristate, default=None)


def _text(css: str):
    return _prop(css, str, lambda value: value or None, default="")


def _real(css: str):
    return _prop(css, float, lambda value: _format_float(value) if value else None, default=0.0)


def _integer(css: str):
    return _prop(css, _parse_int64, lambda value: str(value) if value else None, default=0)


@dataclass
class Style:
    """Declarations of a VML style; unset properties are left out of the text."""

    position: Position = _prop(
        "position",
        _parse_position,
        lambda value: None if value is Position.STATIC else str(value),
        default=Position.STATIC,
    )
    left: Number = _number("left")
    margin_left: Number = _number("margin-left")
    top: Number = _number("top")
    margin_top: Number = _number("margin-top")
    right: Number = _number("right")
    margin_right: Number = _number("margin-right")
    bottom: Number = _number("bottom")
    margin_bottom: Number = _number("margin-bottom")
    width: Number = _number("width")
    height: Number = _number("height")
    z_index: int = _integer("z-index")
    visibility: Visibility = _prop(
        "visibility",
        _parse_visibility,
        lambda value: None if value is Visibility.INHERIT else str(value),
        default=Visibility.INHERIT,
    )
    flip: str = _text("flip")
    font: str = _text("font")
    text_decoration: str = _text("text-decoration")
    trim: Optional[bool] = _tristate("trim")
    x_scale: Optional[bool] = _tristate("xscale")
    mso_fit_shape_to_text: Optional[bool] = _tristate("mso-fit-shape-to-text")
    mso_fit_text_to_shape: Optional[bool] = _tristate("mso-fit-text-to-shape")
    mso_text_shadow: Optional[bool] = _tristate("mso-text-shadow")
    mso_direction_alt: str = _text("mso-direction-alt")
    mso_layout_flow_alt: str = _text("mso-layout-flow-alt")
    mso_next_textbox: str = _text("mso-next-textbox")
    mso_rotate: float = _real("mso-rotate")
    mso_text_scale: float = _real("mso-text-scale")

    @classmethod
    def parse(cls, text: str) -> "Style":
        """Decode a style string; unknown or malformed declarations are ignored."""
        declared = {key: value.strip() for key, value in _DECLARATION_RE.findall(text)}
        values = {}
        for item in fields(cls):
            raw = declared.get(item.metadata["css"])
            if raw is None:
                continue
            try:
                values[item.name] = item.metadata["parse"](raw)
            except ValueError:
                continue
        return cls(**values)

    def __str__(self) -> str:
        parts = []
        for item in fields(self):
            text = item.metadata["format"](getattr(self, item.name))
            if text is not None:
                parts.append(f"{item.metadata['css']}:{text}")
        return ";".join(parts)

    def to_attr(self) -> Optional[str]:
        """Attribute text, or None when nothing is set."""
        return str(self) or None