"""Lengths with CSS units, as they appear in VML style attributes."""

from __future__ import annotations

import enum
import math
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Optional, Union

_NUMBER_RE = re.compile(r"([0-9.]+)(cm|mm|in|pt|pc|px|%)?")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class Unit(enum.Enum):
    """Unit of a Number; the value is the suffix used in text."""

    UNKNOWN = ""
    PX = "px"
    CM = "cm"
    MM = "mm"
    IN = "in"
    PT = "pt"
    PC = "pc"
    PERCENTAGE = "%"


def _format_float(value: float, shortest: Callable[[float], str] = repr) -> str:
    """Format a float the way a shortest-digit '%g' formatter does."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"

    sign, digits, exponent = Decimal(shortest(value)).normalize().as_tuple()
    mantissa = "".join(map(str, digits))
    point = len(mantissa) + exponent
    prefix = "-" if sign else ""
    exp10 = point - 1

    if exp10 < -4 or exp10 >= 6:
        body = mantissa[0] + ("." + mantissa[1:] if len(mantissa) > 1 else "")
        exp_sign = "-" if exp10 < 0 else "+"
        return f"{prefix}{body}e{exp_sign}{abs(exp10):02d}"

    if point <= 0:
        body = "0." + "0" * -point + mantissa
    elif point >= len(mantissa):
        body = mantissa + "0" * (point - len(mantissa))
    else:
        body = mantissa[:point] + "." + mantissa[point:]
    return prefix + body


def _parse_int64(text: str) -> int:
    number = int(text)
    if not _INT64_MIN <= number <= _INT64_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return number


@dataclass(frozen=True, eq=False)
class Number:
    """A numeric value with a unit; an unknown unit means 'not set'."""

    value: Union[int, float, None] = None
    unit: Unit = Unit.UNKNOWN

    def _key(self):
        return (type(self.value), self.value, self.unit)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        if self.unit is Unit.UNKNOWN:
            return ""
        if isinstance(self.value, float):
            text = _format_float(self.value)
        else:
            text = str(self.value)
        return text + self.unit.value

    def to_attr(self) -> Optional[str]:
        """Attribute text, or None when the number is not set."""
        if self.unit is Unit.UNKNOWN:
            return None
        return str(self)


def _parse_number(text: str) -> Number:
    match = _NUMBER_RE.fullmatch(text)
    if match is not None:
        digits, suffix = match.groups()
        unit = Unit(suffix) if suffix else Unit.PX
        if unit in (Unit.CM, Unit.MM, Unit.IN, Unit.PT, Unit.PC):
            try:
                return Number(float(digits), unit)
            except ValueError:
                pass
        else:
            try:
                return Number(_parse_int64(digits), unit)
            except ValueError:
                pass
            try:
                real = float(digits)
            except ValueError:
                pass
            else:
                return Number(real, Unit.PT if unit is Unit.PX else unit)
    return Number(0, Unit.PX)


def make_number(value, unit=None) -> Number:
    """Build a Number from text, an int (pixels by default) or a float (points)."""
    if isinstance(value, str):
        return _parse_number(value)

    resolved = Unit.UNKNOWN if unit is None else Unit(unit)

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return Number(0, Unit.PX)

    if isinstance(value, float):
        if resolved in (Unit.UNKNOWN, Unit.PX):
            resolved = Unit.PT
    elif resolved is Unit.UNKNOWN:
        resolved = Unit.PX

    return Number(value, resolved)