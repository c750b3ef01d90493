"""
Tests for MtgColor symbol mapping.
"""

import pytest

from mtgcolor import MtgColor, InvalidSymbol


def test_bit_values():
    """Bit values are fixed: W=1, U=2, B=4, R=8, G=16."""
    assert [int(c) for c in MtgColor] == [1, 2, 4, 8, 16]
    assert MtgColor.WHITE == 1
    assert MtgColor.GREEN == 16


def test_from_symbol():
    assert MtgColor.from_symbol("W") is MtgColor.WHITE
    assert MtgColor.from_symbol("U") is MtgColor.BLUE
    assert MtgColor.from_symbol("B") is MtgColor.BLACK
    assert MtgColor.from_symbol("R") is MtgColor.RED
    assert MtgColor.from_symbol("G") is MtgColor.GREEN

    print("✓ W U B R G map to White Blue Black Red Green")


def test_symbol_property_inverts_from_symbol():
    for color in MtgColor:
        assert MtgColor.from_symbol(color.symbol) is color
    assert MtgColor.BLUE.symbol == "U"
    assert MtgColor.BLACK.symbol == "B"


@pytest.mark.parametrize("bad", ["J", "w", "", "WU", " ", "C"])
def test_invalid_symbol(bad):
    with pytest.raises(InvalidSymbol) as exc_info:
        MtgColor.from_symbol(bad)
    assert exc_info.value.symbol == bad
    assert isinstance(exc_info.value, ValueError)


@pytest.mark.parametrize("bad", [87, None, b"W"])
def test_invalid_symbol_non_str(bad):
    with pytest.raises(InvalidSymbol):
        MtgColor.from_symbol(bad)
