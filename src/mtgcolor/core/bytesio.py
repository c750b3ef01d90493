"""
Core Component: Byte Encoding

The two wire forms of a color set:
  - raw byte: bits 0..4 meaningful (W=bit 0 ... G=bit 4), bits 5..7 zero
  - symbol string: canonical ASCII rendering

Nothing larger than one set is framed here.
"""

from .registry import BYTE_MASK


def encode_byte(bits: int) -> bytes:
    """
    Encode color bits as exactly one byte.

    Raises:
        SerializationError: If bits is outside 0..31.
    """
    if bits < 0 or bits & ~BYTE_MASK:
        raise SerializationError(f"Color bits {bits} out of range 0..{BYTE_MASK}")
    return bytes([bits])


def decode_byte(data: bytes) -> int:
    """
    Decode a single color byte.

    Raises:
        SerializationError: If data is not exactly one byte, or the top
            three bits are set.
    """
    if len(data) != 1:
        raise SerializationError(f"Expected 1 byte, got {len(data)}")
    value = data[0]
    if value & ~BYTE_MASK:
        raise SerializationError(f"Color byte 0x{value:02x} has bits above bit 4 set")
    return value


def encode_symbols(symbols: str) -> bytes:
    """
    ASCII bytes of a rendered symbol string.

    Raises:
        SerializationError: If symbols contains non-ASCII characters.
    """
    try:
        return symbols.encode('ascii')
    except UnicodeEncodeError as e:
        raise SerializationError(f"Symbols {symbols!r} are not ASCII") from e


class SerializationError(Exception):
    """Raised when a byte or symbol encoding is malformed."""
    pass
