"""
mtgcolor: five-color sets packed into one byte.

Bit layout W=1, U=2, B=4, R=8, G=16 with a fixed canonical rendering.
"""

__version__ = "0.1.0"

from .color import MtgColor, InvalidSymbol
from .colorset import ColorSet, OutOfRange
from .table import CANONICAL_SYMBOLS, render, table_receipts

__all__ = [
    "MtgColor",
    "InvalidSymbol",
    "ColorSet",
    "OutOfRange",
    "CANONICAL_SYMBOLS",
    "render",
    "table_receipts",
]
