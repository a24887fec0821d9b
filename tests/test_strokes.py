import pytest

from vmlshapes.strokes import (
    StrokeArrowLength,
    StrokeArrowType,
    StrokeArrowWidth,
    StrokeDashStyle,
    StrokeEndCap,
    StrokeJoinStyle,
    StrokeLineStyle,
)


def test_arrow_length_round_trip():
    for member in StrokeArrowLength:
        assert member.encode("attribute") == ("attribute", str(member))
        assert StrokeArrowLength.decode(str(member)) is member


def test_arrow_type_round_trip():
    for member in StrokeArrowType:
        assert member.encode("attribute") == ("attribute", str(member))
        assert StrokeArrowType.decode(str(member)) is member


def test_arrow_width_round_trip():
    for member in StrokeArrowWidth:
        assert member.encode("attribute") == ("attribute", str(member))
        assert StrokeArrowWidth.decode(str(member)) is member


def test_dash_style_round_trip():
    for member in StrokeDashStyle:
        assert member.encode("attribute") == ("attribute", str(member))
        assert StrokeDashStyle.decode(str(member)) is member


def test_end_cap_round_trip():
    for member in StrokeEndCap:
        assert member.encode("attribute") == ("attribute", str(member))
        assert StrokeEndCap.decode(str(member)) is member


def test_join_style_round_trip():
    for member in StrokeJoinStyle:
        assert member.encode("attribute") == ("attribute", str(member))
        assert StrokeJoinStyle.decode(str(member)) is member


def test_line_style_round_trip():
    for member in StrokeLineStyle:
        assert member.encode("attribute") == ("attribute", str(member))
        assert StrokeLineStyle.decode(str(member)) is member


@pytest.mark.parametrize("text", ["", "no-such-value"])
def test_unset_value_decodes_to_none(text):
    assert StrokeArrowLength.decode(text) is None
    assert StrokeArrowType.decode(text) is None
    assert StrokeArrowWidth.decode(text) is None
    assert StrokeDashStyle.decode(text) is None
    assert StrokeEndCap.decode(text) is None
    assert StrokeJoinStyle.decode(text) is None
    assert StrokeLineStyle.decode(text) is None


@pytest.mark.parametrize(
    "member, text",
    [
        (StrokeArrowLength.SHORT, "short"),
        (StrokeArrowLength.MEDIUM, "medium"),
        (StrokeArrowLength.LONG, "long"),
        (StrokeArrowType.NONE, "none"),
        (StrokeArrowType.BLOCK, "block"),
        (StrokeArrowType.CLASSIC, "classic"),
        (StrokeArrowType.OVAL, "oval"),
        (StrokeArrowType.DIAMOND, "diamond"),
        (StrokeArrowType.OPEN, "open"),
        (StrokeArrowWidth.NARROW, "narrow"),
        (StrokeArrowWidth.MEDIUM, "medium"),
        (StrokeArrowWidth.WIDE, "wide"),
        (StrokeDashStyle.SOLID, "solid"),
        (StrokeDashStyle.SHORT_DASH, "shortdash"),
        (StrokeDashStyle.SHORT_DOT, "shortdot"),
        (StrokeDashStyle.SHORT_DASH_DOT, "shortdashdot"),
        (StrokeDashStyle.SHORT_DASH_DOT_DOT, "shortdashdotdot"),
        (StrokeDashStyle.DOT, "dot"),
        (StrokeDashStyle.DASH, "dash"),
        (StrokeDashStyle.LONG_DASH, "longdash"),
        (StrokeDashStyle.DASH_DOT, "dashdot"),
        (StrokeDashStyle.LONG_DASH_DOT, "longdashdot"),
        (StrokeDashStyle.LONG_DASH_DOT_DOT, "longdashdotdot"),
        (StrokeEndCap.FLAT, "flat"),
        (StrokeEndCap.SQUARE, "square"),
        (StrokeEndCap.ROUND, "round"),
        (StrokeJoinStyle.ROUND, "round"),
        (StrokeJoinStyle.BEVEL, "bevel"),
        (StrokeJoinStyle.MITER, "miter"),
        (StrokeLineStyle.SINGLE, "single"),
        (StrokeLineStyle.THIN_THIN, "thinThin"),
        (StrokeLineStyle.THIN_THICK, "thinThick"),
        (StrokeLineStyle.THICK_THIN, "thickThin"),
        (StrokeLineStyle.THICK_BETWEEN_THIN, "thickBetweenThin"),
    ],
)
def test_text_values(member, text):
    assert str(member) == text


def test_dash_style_decode_ignores_case():
    assert StrokeDashStyle.decode("LongDashDot") is StrokeDashStyle.LONG_DASH_DOT
    assert StrokeDashStyle.decode("SOLID") is StrokeDashStyle.SOLID


def test_other_strokes_are_case_sensitive():
    assert StrokeJoinStyle.decode("Miter") is None
    assert StrokeLineStyle.decode("thinthin") is None


def test_dash_style_decode_of_non_text_is_none():
    assert StrokeDashStyle.decode(None) is None