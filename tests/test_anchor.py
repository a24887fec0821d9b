import pytest

from vmlshapes.anchor import ClientDataAnchor

EXPECTED = ClientDataAnchor(
    left_column=1,
    left_offset=15,
    top_row=0,
    top_offset=2,
    right_column=3,
    right_offset=15,
    bottom_row=3,
    bottom_offset=16,
)


def test_parse_and_format():
    anchor = ClientDataAnchor.parse("1, 15, 0, 2, 3, 15, 3, 16")
    assert anchor == EXPECTED
    assert str(anchor) == "1, 15, 0, 2, 3, 15, 3, 16"


def test_parse_irregular_whitespace():
    assert ClientDataAnchor.parse(" 1,15,0,2, 3, 15,3, 16 ") == EXPECTED


def test_parse_invalid_number():
    with pytest.raises(ValueError):
        ClientDataAnchor.parse(" x,15,0,2, 3, 15,3, 16 ")


def test_parse_empty_text_fails():
    with pytest.raises(ValueError):
        ClientDataAnchor.parse("")


def test_parse_short_list_leaves_rest_zero():
    anchor = ClientDataAnchor.parse("4, 5")
    assert anchor == ClientDataAnchor(left_column=4, left_offset=5)


def test_parse_negative_numbers():
    anchor = ClientDataAnchor.parse("-1, 0, 0, 0, 0, 0, 0, 2")
    assert anchor.left_column == -1
    assert anchor.bottom_offset == 2


def test_default_text():
    assert str(ClientDataAnchor()) == "0, 0, 0, 0, 0, 0, 0, 0"


def test_round_trip():
    text = "3, 15, 1, 10, 5, 15, 2, 64"
    assert str(ClientDataAnchor.parse(text)) == text