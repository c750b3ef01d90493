"""
Core Component: Parameter Registry

Frozen constants for the five-color bit layout and its canonical rendering.
Bit values and the 32-entry symbol table are a compatibility contract:
callers may persist the byte form or sort/display by the string form.

No randomness, no environment leakage, no optionals.
"""


# Bit order, low to high: W=1, U=2, B=4, R=8, G=16
SYMBOL_ORDER = "WUBRG"

# Canonical rendering indexed by bits (0..31)
CANONICAL_TABLE = (
    "", "W", "U", "WU", "B", "WB", "UB", "WUB",
    "R", "RW", "UR", "URW", "BR", "RWB", "UBR", "WUBR",
    "G", "GW", "GU", "GWU", "BG", "WBG", "BGU", "GWUB",
    "RG", "RGW", "GUR", "RGWU", "BRG", "BRGW", "UBRG", "WUBRG",
)

BYTE_MASK = 0b11111


def param_registry() -> dict:
    """
    Returns a frozen mapping of all constants used by mtgcolor.

    Keys and values are JSON-serializable primitives or lists.
    This registry is hashed into every section receipt to prove the
    bit layout and table in use.

    Returns:
        dict: Fresh parameter mapping with exact keys and values.

    Raises:
        RegistryError: If any required key is missing (internal consistency check).
    """
    registry = {
        "format_version": "1.0",

        # One power-of-two bit per color symbol
        "color_bits": {sym: 1 << i for i, sym in enumerate(SYMBOL_ORDER)},
        "symbol_order": SYMBOL_ORDER,
        "num_colors": len(SYMBOL_ORDER),

        # Upper 3 bits of the byte are always zero in valid sets
        "byte_mask": BYTE_MASK,

        "canonical_table": list(CANONICAL_TABLE),

        # Hashing
        "hash_algo": "BLAKE3",

        # Rendered strings are pure ASCII
        "symbol_encoding": "ascii",
    }

    required_keys = {
        "format_version", "color_bits", "symbol_order", "num_colors",
        "byte_mask", "canonical_table", "hash_algo", "symbol_encoding",
    }

    actual_keys = set(registry.keys())
    if actual_keys != required_keys:
        missing = required_keys - actual_keys
        extra = actual_keys - required_keys
        raise RegistryError(
            f"param_registry() key mismatch. Missing: {missing}, Extra: {extra}"
        )

    if len(registry["canonical_table"]) != registry["byte_mask"] + 1:
        raise RegistryError(
            f"canonical_table has {len(registry['canonical_table'])} entries, "
            f"expected {registry['byte_mask'] + 1}"
        )

    return registry


class RegistryError(Exception):
    """Raised when param_registry() has missing or unexpected keys."""
    pass
