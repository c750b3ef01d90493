"""
Canonical rendering of color bits.

Every one of the 32 possible sets renders as a fixed string; the order
is not alphabetical and not bit order (e.g. W+G renders "GW", U+R
renders "UR"). The table is a direct lookup indexed by bits.
"""

from .core.registry import CANONICAL_TABLE, BYTE_MASK

CANONICAL_SYMBOLS: tuple[str, ...] = CANONICAL_TABLE


def render(bits: int) -> str:
    """
    Symbols for color bits in canonical order.

    Only the lower 5 bits are considered, so any int renders.
    """
    return CANONICAL_SYMBOLS[bits & BYTE_MASK]


def table_receipts(section_label: str = "table") -> dict:
    """
    Generate receipts proving the canonical table is usable as a
    two-way encoding.

    Payload:
      - table_hash: BLAKE3 of the ASCII table joined with ","
      - injective: all 32 renders are distinct
      - popcount_ok: each render has one symbol per set bit
      - roundtrip_ok: strict parse of each render gives back its bits
      - roundtrip_failures: bits values whose round-trip failed

    Returns:
        dict: Receipt digest.
    """
    from .core import Receipts, blake3_hash, encode_symbols
    from .colorset import ColorSet

    receipts = Receipts(section_label)

    receipts.put("table_hash", blake3_hash(encode_symbols(",".join(CANONICAL_SYMBOLS))))
    receipts.put("injective", len(set(CANONICAL_SYMBOLS)) == len(CANONICAL_SYMBOLS))
    receipts.put(
        "popcount_ok",
        all(len(render(b)) == bin(b).count("1") for b in range(BYTE_MASK + 1))
    )

    failures = [
        b for b in range(BYTE_MASK + 1)
        if ColorSet.try_from_str(render(b)).to_byte() != b
    ]
    receipts.put("roundtrip_ok", not failures)
    receipts.put("roundtrip_failures", failures)

    return receipts.digest()
