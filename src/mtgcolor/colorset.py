"""
ColorSet: which of the five colors are present, packed into one byte.

Representation:
  - bits: int in 0..31
  - bit value of MtgColor c set ⟺ c is in the set
  - bits 5..7 are always zero for any set built through this API

Two constructor families exist side by side:
  - strict (try_from_str, try_from_byte, from_bytes): reject bad input
  - permissive (from_symbols, from_byte): skip or mask bad input
"""

from typing import Iterable, Iterator

from .color import MtgColor, InvalidSymbol
from .core.registry import BYTE_MASK
from .core.bytesio import encode_byte, decode_byte
from .table import render


class ColorSet:
    """
    Mutable set of MtgColor backed by a 5-bit mask.

    Equality and rendering depend only on bits. Being mutable, a ColorSet
    is not hashable; use to_byte() as a dict key.

    Methods taking a color accept an MtgColor or its int value; any other
    int raises ValueError, so bits above bit 4 can never be set.
    """

    __slots__ = ("bits",)

    def __init__(self, bits: int = 0):
        # Internal; callers go through the named constructors
        self.bits = bits & BYTE_MASK

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def empty(cls) -> "ColorSet":
        """Colorless set (bits == 0)."""
        return cls(0)

    @classmethod
    def from_symbols(cls, symbols: Iterable[str]) -> "ColorSet":
        """
        Permissive parse: characters other than W, U, B, R, G are skipped.

        Args:
            symbols: String (or any iterable of characters).

        Returns:
            ColorSet: Union of every recognized symbol. Never raises for
                unknown characters.

        Example:
            >>> ColorSet.from_symbols("{2}{G}{W}").symbols()
            'GW'
        """
        c = cls()
        for ch in symbols:
            try:
                color = MtgColor.from_symbol(ch)
            except InvalidSymbol:
                continue
            c.add(color)
        return c

    @classmethod
    def try_from_str(cls, symbols: Iterable[str]) -> "ColorSet":
        """
        Strict parse: every character must be one of W, U, B, R, G.

        Order and repetition are irrelevant ("BUW" == "WUB" == "WWUB").

        Args:
            symbols: String (or any iterable of characters).

        Returns:
            ColorSet: Union of the parsed colors.

        Raises:
            InvalidSymbol: On the first unrecognized element, including
                non-str elements. No partial set is returned.
        """
        return cls.from_colors(MtgColor.from_symbol(ch) for ch in symbols)

    @classmethod
    def from_colors(cls, colors: Iterable[MtgColor]) -> "ColorSet":
        """
        Bitwise OR of the given colors; duplicates are harmless.

        Raises:
            ValueError: If an element is not an MtgColor value.
        """
        c = cls()
        for color in colors:
            c.add(color)
        return c

    @classmethod
    def try_from_byte(cls, value: int) -> "ColorSet":
        """
        Strict raw-byte constructor.

        Args:
            value: Color bits, must be in 0..31.

        Returns:
            ColorSet: Set with bits == value.

        Raises:
            OutOfRange: If any bit above bit 4 is set, or value is negative.
        """
        if value < 0 or value & ~BYTE_MASK:
            raise OutOfRange(value)
        return cls(value)

    @classmethod
    def from_byte(cls, value: int) -> "ColorSet":
        """Permissive: the top three bits are ignored."""
        return cls(value & BYTE_MASK)

    @classmethod
    def from_bytes(cls, data: bytes) -> "ColorSet":
        """
        Decode the one-byte wire form.

        Raises:
            SerializationError: If data is not exactly one byte below 32.
        """
        return cls(decode_byte(data))

    def copy(self) -> "ColorSet":
        return type(self)(self.bits)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add(self, color: MtgColor) -> None:
        """
        Set the bit of color. Adding a present color is a no-op.

        Raises:
            ValueError: If color is not one of 1, 2, 4, 8, 16.
        """
        self.bits |= MtgColor(color)

    def remove(self, color: MtgColor) -> None:
        """
        Clear the bit of color. Absent colors are ignored.

        Raises:
            ValueError: If color is not one of 1, 2, 4, 8, 16.
        """
        self.bits &= ~MtgColor(color) & BYTE_MASK

    def set_colorless(self) -> None:
        self.bits = 0

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def contains(self, color: MtgColor) -> bool:
        """True iff the bit of color is set."""
        return bool(self.bits & MtgColor(color))

    def contains_only(self, color: MtgColor) -> bool:
        """True iff this is exactly the monocolor set of color."""
        return self.bits == MtgColor(color)

    def is_colorless(self) -> bool:
        return self.bits == 0

    def count(self) -> int:
        """Number of colors present (population count, 0..5)."""
        return bin(self.bits).count("1")

    def is_monocolor(self) -> bool:
        return self.count() == 1

    def is_multicolor(self) -> bool:
        return self.count() > 1

    def is_subset_of(self, other: "ColorSet") -> bool:
        """
        Every color of self is also in other.

        Args:
            other: Set to compare against.

        Returns:
            bool: self.bits & other.bits == self.bits. The empty set is a
                subset of everything; every set is a subset of itself.
        """
        return self.bits & other.bits == self.bits

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def symbols(self) -> str:
        """Member symbols in canonical order (see table.CANONICAL_SYMBOLS)."""
        return render(self.bits)

    def colors(self) -> list[MtgColor]:
        """Members in bit order (W, U, B, R, G)."""
        return [color for color in MtgColor if self.bits & color]

    def to_byte(self) -> int:
        """Raw bits, always in 0..31; lossless and total."""
        return self.bits

    def to_bytes(self) -> bytes:
        """One-byte wire form, the inverse of from_bytes()."""
        return encode_byte(self.bits)

    # ------------------------------------------------------------------
    # Python protocol
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorSet):
            return NotImplemented
        return self.bits == other.bits

    __hash__ = None  # mutable

    # Subset ordering, as for the built-in set
    def __le__(self, other: "ColorSet") -> bool:
        if not isinstance(other, ColorSet):
            return NotImplemented
        return self.is_subset_of(other)

    def __lt__(self, other: "ColorSet") -> bool:
        if not isinstance(other, ColorSet):
            return NotImplemented
        return self.bits != other.bits and self.is_subset_of(other)

    def __ge__(self, other: "ColorSet") -> bool:
        if not isinstance(other, ColorSet):
            return NotImplemented
        return other.is_subset_of(self)

    def __gt__(self, other: "ColorSet") -> bool:
        if not isinstance(other, ColorSet):
            return NotImplemented
        return self.bits != other.bits and other.is_subset_of(self)

    def __contains__(self, color: MtgColor) -> bool:
        return self.contains(color)

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Iterator[MtgColor]:
        return iter(self.colors())

    def __int__(self) -> int:
        return self.bits

    __index__ = __int__

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __str__(self) -> str:
        return self.symbols()

    def __repr__(self) -> str:
        return f"ColorSet({self.symbols()!r})"


class OutOfRange(ValueError):
    """Raised when a raw byte has any of its top three bits set."""

    def __init__(self, value: int):
        self.value = value
        super().__init__(f"ColorSet byte {value} out of range 0..{BYTE_MASK}")
