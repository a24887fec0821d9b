# vmlshapes

Value types for the small pieces VML (Vector Markup Language) drawings are
built from, as they appear inside Office Open XML documents. It needs
nothing beyond the standard library.

## Modules

- `vmlshapes.number`: `Unit` and `Number`, a CSS length with a unit
  (`px`, `cm`, `mm`, `in`, `pt`, `pc`, `%`). Build one with `make_number`.
  Pass it text, an int (pixels by default) or a float (points by default;
  a float is never in pixels). Text that cannot be read gives `0px`.
  `Number.to_attr()` returns the attribute text, or `None` when the unit is
  unknown (not set).
- `vmlshapes.fraction`: `parse_fraction` reads `0.5` or `50%` and rounds the
  result to single precision. Text that does not look like a fraction gives
  `0.0`. A malformed number raises `ValueError`. `format_fraction` returns
  the text, or `None` for zero.
- `vmlshapes.css_enums`: the `Position` and `Visibility` CSS keywords.
  `decode` returns `None` for unknown text.
- `vmlshapes.style`: `Style`, a dataclass for the declarations of a VML
  `style` attribute. `Style.parse` ignores unknown or malformed declarations.
  `str(style)` writes only the properties that are set. `to_attr()` returns
  `None` when nothing is set.
- `vmlshapes.attributes`: `AttributeEnum` and the enumerations
  `ConnectType`, `ExtType`, `FillMethod`, `FillType`, `ImageAspect`,
  `InsetMode`, `ObjectType` and `ShadowType`. `decode` returns `None` for
  unknown text. `encode(name)` gives the attribute name and text. The name
  carries the namespace prefix where the type has one: `o:` for
  `ConnectType` and `InsetMode`, `v:` for `ExtType`.
- `vmlshapes.strokes`: `StrokeArrowLength`, `StrokeArrowType`,
  `StrokeArrowWidth`, `StrokeDashStyle`, `StrokeEndCap`, `StrokeJoinStyle`
  and `StrokeLineStyle`. `StrokeDashStyle.decode` ignores letter case.
- `vmlshapes.anchor`: `ClientDataAnchor`, the eight-number anchor of a
  spreadsheet comment or control.
- `vmlshapes.idmap`: `IdMap`, the `o:idmap` element, read from and written
  to `xml.etree.ElementTree` elements.

## Installation

```
pip install vmlshapes
```

## Examples

Numbers with units:

```python
from vmlshapes.number import Unit, make_number

print(make_number("96px"))        # 96px
print(make_number(1.5, Unit.CM))  # 1.5cm
print(make_number(10))            # 10px
print(make_number(10.5))          # 10.5pt
```

Fractions:

```python
from vmlshapes.fraction import format_fraction, parse_fraction

parse_fraction("50%")   # 0.5
format_fraction(-0.5)   # "-0.5"
format_fraction(0)      # None
```

Styles:

```python
from vmlshapes.style import Style

style = Style.parse("position:absolute;margin-left:59.25pt;width:96px;height:55px")
print(style.position)   # absolute
print(style.width)      # 96px
print(str(style))       # position:absolute;margin-left:59.25pt;width:96px;height:55px
```

Attribute values:

```python
from vmlshapes.attributes import ConnectType, ObjectType
from vmlshapes.strokes import StrokeDashStyle

ConnectType.decode("rect")            # ConnectType.RECT
ConnectType.RECT.encode("connecttype")  # ("o:connecttype", "rect")
str(ObjectType.NOTE)                  # "Note"
StrokeDashStyle.decode("LongDash")    # StrokeDashStyle.LONG_DASH
```

Spreadsheet anchors:

```python
from vmlshapes.anchor import ClientDataAnchor

anchor = ClientDataAnchor.parse(" 1,15,0,2, 3, 15,3, 16 ")
print(anchor.left_column, anchor.bottom_offset)  # 1 16
print(anchor)                                    # 1, 15, 0, 2, 3, 15, 3, 16
```

If fewer than eight numbers are given, the missing ones stay zero. Extra
numbers are ignored. An item that is not an integer raises `ValueError`.

Id maps:

```python
from vmlshapes.attributes import ExtType
from vmlshapes.idmap import IdMap

idmap = IdMap(ext=ExtType.EDIT, data="1")
print(idmap.to_xml())   # <o:idmap v:ext="edit" data="1"></o:idmap>
```

`IdMap.from_element` raises `ValueError` for an element that is not an
`idmap`.

## What it does not do

The package handles single values and the `idmap` element only. It does not:

- read or write whole VML drawings;
- model shapes, shape types, paths, fills or strokes as elements;
- model client data elements;
- open Office documents.

## Running the tests

```
pip install -e ".[test]"
pytest
```