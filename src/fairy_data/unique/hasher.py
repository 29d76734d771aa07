"""Canonical fingerprints for produced values.

Fingerprints only need to detect accidental duplicates in test data, so a
short non-cryptographic digest is enough.
"""

from typing import Any
import hashlib

DIGEST_SIZE = 8

_INT_KIND = b"i"
_STR_KIND = b"s"
_TEXT_KIND = b"t"


def _int_bytes(value: int) -> bytes:
    # two's complement, at least 64 bits wide
    length = max(8, (value.bit_length() + 8) // 8)
    return value.to_bytes(length, byteorder="little", signed=True)


def fingerprint(value: Any) -> str:
    """Compute a stable hex fingerprint for a produced value.

    Integers hash their exact bit pattern, strings their UTF-8 bytes and any
    other value the UTF-8 bytes of ``str(value)``. Types fed through this
    function must therefore have a deterministic, value-based text form.

    Raises:
        TypeError: If value is None
    """
    if value is None:
        raise TypeError("cannot fingerprint None")

    if isinstance(value, int) and not isinstance(value, bool):
        payload = _INT_KIND + _int_bytes(value)
    elif isinstance(value, str):
        payload = _STR_KIND + value.encode("utf-8")
    else:
        payload = _TEXT_KIND + str(value).encode("utf-8")

    return hashlib.blake2b(payload, digest_size=DIGEST_SIZE).hexdigest()
