"""
Core Component: BLAKE3 Hashing

Fingerprints for the canonical table and for section receipts.
"""

import blake3


def blake3_hash(data: bytes) -> str:
    """
    Return hex-encoded BLAKE3 digest of the byte stream.

    Output is always lowercase hex, 64 characters. No seeding or
    personalization.

    Example:
        >>> blake3_hash(b"test")
        '4878ca0425c739fa427f7eda20fe845f6b2e46ba5fe2a14df5b1e32f50603215'
    """
    return blake3.blake3(data).hexdigest()
