"""
Core Component: Section Receipts & Double-Run Checker

Ordered, hashed records of what a section computed. Every digest binds
the registry hash, so a receipt produced against a different bit layout
or symbol table can never compare equal.

No timestamps, no memory addresses, no floats.
"""

import json
from typing import Any, Callable

from .registry import param_registry
from .hashing import blake3_hash


class Receipts:
    """
    Section-scoped receipt builder.

    A section creates a Receipts instance, records key/value pairs with
    put(), and produces a digest with:
      - section identifier
      - format_version
      - param_registry_hash
      - payload (insertion-ordered key/value pairs)
      - section_hash (BLAKE3 over all of the above)

    Values are restricted to int, bool, str, None, and lists/tuples/dicts
    of those.
    """

    def __init__(self, section: str):
        self.section = section
        self.payload = []  # list of (key, value) to preserve insertion order

    def put(self, key: str, value: Any) -> None:
        """
        Record key/value pair.

        Raises:
            ReceiptError: If key is duplicate or value holds a forbidden type.
        """
        if any(k == key for k, _ in self.payload):
            raise ReceiptError(f"Duplicate key in receipts: '{key}'")

        _validate_receipt_value(value, key)

        self.payload.append((key, value))

    def digest(self) -> dict:
        """
        Returns the complete receipt digest with section_hash.

        Format:
          {
            "section": section,
            "format_version": registry format_version,
            "param_registry_hash": blake3_hash(stable_json(param_registry())),
            "payload": {key: value, ...},
            "section_hash": blake3_hash(stable_json(everything above))
          }
        """
        registry = param_registry()
        registry_hash = blake3_hash(_stable_json_bytes(registry))

        pre_digest = {
            "section": self.section,
            "format_version": registry["format_version"],
            "param_registry_hash": registry_hash,
            "payload": {k: v for k, v in self.payload},
        }

        section_hash = blake3_hash(_stable_json_bytes(pre_digest))

        return {**pre_digest, "section_hash": section_hash}


def assert_double_run_equal(build_section_callable: Callable[[], Receipts]) -> None:
    """
    Calls build_section_callable() twice and verifies identical section_hash.

    Raises:
        DeterminismError: If section_hash differs between runs.

    Example:
        >>> def build():
        ...     r = Receipts("render")
        ...     r.put("WUBRG", 31)
        ...     return r
        >>> assert_double_run_equal(build)  # passes
    """
    digest_a = build_section_callable().digest()
    digest_b = build_section_callable().digest()

    hash_a = digest_a["section_hash"]
    hash_b = digest_b["section_hash"]
    if hash_a == hash_b:
        return

    payload_a = digest_a["payload"]
    payload_b = digest_b["payload"]

    # First differing key in insertion order of run A, then keys only in B
    differing_key = None
    value_a = value_b = None
    for key in list(payload_a) + [k for k in payload_b if k not in payload_a]:
        val_a = payload_a.get(key, "<MISSING>")
        val_b = payload_b.get(key, "<MISSING>")
        if val_a != val_b:
            differing_key, value_a, value_b = key, val_a, val_b
            break

    raise DeterminismError(
        section=digest_a["section"],
        first_differing_key=differing_key,
        value_a=value_a,
        value_b=value_b,
        hash_a=hash_a,
        hash_b=hash_b
    )


def _stable_json_bytes(obj: Any) -> bytes:
    """Sorted keys, compact separators, UTF-8."""
    json_str = json.dumps(
        obj,
        sort_keys=True,
        ensure_ascii=False,
        separators=(',', ':')
    )
    return json_str.encode('utf-8')


def _validate_receipt_value(value: Any, key: str) -> None:
    """
    Recursively validate that value contains only allowed types.

    Raises:
        ReceiptError: If value contains floats, non-str dict keys or
            any type outside int/bool/str/None/list/tuple/dict.
    """
    if value is None or isinstance(value, (bool, int, str)):
        return

    if isinstance(value, float):
        raise ReceiptError(f"Floats forbidden in receipts (key: '{key}')")

    if isinstance(value, (list, tuple)):
        for i, item in enumerate(value):
            _validate_receipt_value(item, f"{key}[{i}]")
        return

    if isinstance(value, dict):
        for k, v in value.items():
            if not isinstance(k, str):
                raise ReceiptError(
                    f"Dict keys must be strings in receipts (key: '{key}', dict_key: {k})"
                )
            _validate_receipt_value(v, f"{key}.{k}")
        return

    raise ReceiptError(
        f"Invalid type in receipts: {type(value).__name__} (key: '{key}'). "
        f"Allowed: int, bool, str, None, list, tuple, dict."
    )


class ReceiptError(Exception):
    """Raised when receipt construction gets a duplicate key or invalid value."""
    pass


class DeterminismError(Exception):
    """Raised when double-run produces different section hashes."""

    def __init__(
        self,
        section: str,
        first_differing_key: str | None,
        value_a: Any,
        value_b: Any,
        hash_a: str,
        hash_b: str
    ):
        self.section = section
        self.first_differing_key = first_differing_key
        self.value_a = value_a
        self.value_b = value_b
        self.hash_a = hash_a
        self.hash_b = hash_b

        msg = (
            f"Double-run hash mismatch in section '{section}'.\n"
            f"  First differing key: '{first_differing_key}'\n"
            f"  Value A: {value_a}\n"
            f"  Value B: {value_b}\n"
            f"  Hash A: {hash_a}\n"
            f"  Hash B: {hash_b}"
        )
        super().__init__(msg)
