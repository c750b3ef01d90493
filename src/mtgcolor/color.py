"""
The five colors and their single-letter symbols.

Each color owns one bit of a ColorSet byte:
  WHITE=1 (W), BLUE=2 (U), BLACK=4 (B), RED=8 (R), GREEN=16 (G)

Blue is U, not B; B is Black.
"""

import enum

from .core.registry import SYMBOL_ORDER


class MtgColor(enum.IntEnum):
    WHITE = 1
    BLUE = 2
    BLACK = 4
    RED = 8
    GREEN = 16

    @classmethod
    def from_symbol(cls, symbol: str) -> "MtgColor":
        """
        Map one of 'W', 'U', 'B', 'R', 'G' to its color.

        Raises:
            InvalidSymbol: For anything else, including lowercase
                letters, strings longer than one character and non-str
                values such as the ints produced by iterating bytes.
        """
        if not isinstance(symbol, str) or len(symbol) != 1 or symbol not in SYMBOL_ORDER:
            raise InvalidSymbol(symbol)
        return cls(1 << SYMBOL_ORDER.index(symbol))

    @property
    def symbol(self) -> str:
        return SYMBOL_ORDER[self.value.bit_length() - 1]


class InvalidSymbol(ValueError):
    """Raised when a character is not one of W, U, B, R, G."""

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"Invalid color symbol: {symbol!r}")
