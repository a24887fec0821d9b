"""Value types for VML drawings: CSS styles, numbers, fractions, attribute enums, anchors, id maps."""

__version__ = "0.1.0"

__all__ = [
    "anchor",
    "attributes",
    "css_enums",
    "fraction",
    "idmap",
    "number",
    "strokes",
    "style",
]