"""
Core foundation: frozen constants, hashing, receipts, byte encoding.
"""

from .registry import param_registry, RegistryError, CANONICAL_TABLE, BYTE_MASK
from .hashing import blake3_hash
from .bytesio import (
    encode_byte,
    decode_byte,
    encode_symbols,
    SerializationError
)
from .receipts import (
    Receipts,
    assert_double_run_equal,
    ReceiptError,
    DeterminismError
)

__all__ = [
    # Registry
    "param_registry",
    "RegistryError",
    "CANONICAL_TABLE",
    "BYTE_MASK",

    # Hashing
    "blake3_hash",

    # Serialization
    "encode_byte",
    "decode_byte",
    "encode_symbols",
    "SerializationError",

    # Receipts
    "Receipts",
    "assert_double_run_equal",
    "ReceiptError",
    "DeterminismError",
]
