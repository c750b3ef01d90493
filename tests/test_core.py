"""
Core foundation tests

Tests:
1. param_registry() has all required keys and the canonical constants
2. blake3_hash() is deterministic
3. encode_byte/decode_byte/encode_symbols accept and reject correctly
4. Receipts.digest() is deterministic and rejects bad values
5. assert_double_run_equal() catches non-determinism
"""

import pytest

from mtgcolor.core import (
    param_registry,
    blake3_hash,
    encode_byte,
    decode_byte,
    encode_symbols,
    SerializationError,
    Receipts,
    assert_double_run_equal,
    ReceiptError,
    DeterminismError,
)


def test_param_registry():
    """Verify param_registry has all required keys and correct values."""
    registry = param_registry()

    required_keys = {
        "format_version", "color_bits", "symbol_order", "num_colors",
        "byte_mask", "canonical_table", "hash_algo", "symbol_encoding",
    }
    assert set(registry.keys()) == required_keys

    assert registry["color_bits"] == {"W": 1, "U": 2, "B": 4, "R": 8, "G": 16}
    assert registry["symbol_order"] == "WUBRG"
    assert registry["num_colors"] == 5
    assert registry["byte_mask"] == 31
    assert len(registry["canonical_table"]) == 32
    assert registry["canonical_table"][31] == "WUBRG"
    assert registry["hash_algo"] == "BLAKE3"

    print("✓ param_registry() correct")


def test_param_registry_is_fresh():
    """Mutating a returned registry does not leak into the next call."""
    registry = param_registry()
    registry["canonical_table"][0] = "X"
    assert param_registry()["canonical_table"][0] == ""


def test_blake3_deterministic():
    data = b"WUBRG"
    hash1 = blake3_hash(data)
    hash2 = blake3_hash(data)

    assert hash1 == hash2
    assert len(hash1) == 64
    assert hash1 == hash1.lower()
    assert blake3_hash(b"GW") != hash1

    print(f"✓ blake3_hash() deterministic (sample: {hash1[:16]}...)")


def test_encode_decode_byte():
    for bits in range(32):
        assert decode_byte(encode_byte(bits)) == bits

    with pytest.raises(SerializationError):
        encode_byte(32)
    with pytest.raises(SerializationError):
        encode_byte(-1)
    with pytest.raises(SerializationError):
        decode_byte(b"\xe0")
    with pytest.raises(SerializationError):
        decode_byte(b"")


def test_encode_symbols():
    assert encode_symbols("GWU") == b"GWU"
    assert encode_symbols("") == b""

    with pytest.raises(SerializationError):
        encode_symbols("Ẃ")


def test_receipts():
    receipts = Receipts("test-section")
    receipts.put("bits", 19)
    receipts.put("symbols", "GWU")
    receipts.put("members", ["W", "U", "G"])
    receipts.put("flags", {"multicolor": True})

    digest = receipts.digest()

    assert digest["section"] == "test-section"
    assert digest["format_version"] == "1.0"
    assert len(digest["param_registry_hash"]) == 64
    assert len(digest["section_hash"]) == 64
    assert digest["payload"]["bits"] == 19
    assert list(digest["payload"]) == ["bits", "symbols", "members", "flags"]


def test_receipts_rejects_bad_values():
    receipts = Receipts("test")

    with pytest.raises(ReceiptError, match="Floats"):
        receipts.put("bad", 3.14)

    with pytest.raises(ReceiptError):
        receipts.put("bad_key", {1: "W"})

    with pytest.raises(ReceiptError):
        receipts.put("bad_obj", object())

    receipts.put("ok", 1)
    with pytest.raises(ReceiptError, match="Duplicate"):
        receipts.put("ok", 2)


def test_double_run():
    def build_deterministic():
        r = Receipts("deterministic")
        r.put("bits", 31)
        r.put("symbols", "WUBRG")
        return r

    assert_double_run_equal(build_deterministic)

    counter = [0]

    def build_nondeterministic():
        r = Receipts("nondeterministic")
        r.put("symbols", "WUBRG")
        counter[0] += 1
        r.put("bits", counter[0])
        return r

    with pytest.raises(DeterminismError) as exc_info:
        assert_double_run_equal(build_nondeterministic)

    e = exc_info.value
    assert e.section == "nondeterministic"
    assert e.first_differing_key == "bits"
    assert e.value_a == 1
    assert e.value_b == 2
    assert e.hash_a != e.hash_b

    print("✓ Double-run check catches non-determinism")
