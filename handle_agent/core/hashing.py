"""Seeded string hashing.

The generator's "randomness" comes entirely from this hash, so its arithmetic
is fixed: a Java-style ``acc * 31 + code`` fold over UTF-16 code units with
signed 32-bit wraparound.  Changing it changes every suggestion set.
"""

from __future__ import annotations

_MASK_32 = 0xFFFFFFFF
_SIGN_BIT = 0x80000000


def _utf16_code_units(value: str):
    data = value.encode("utf-16-le")
    for index in range(0, len(data), 2):
        yield int.from_bytes(data[index:index + 2], "little")


def hash_string(value: str, salt: int) -> int:
    """Hash ``"{value}:{salt}"`` into a non-negative integer.

    Parameters
    ----------
    value: str
        Input string.
    salt: int
        Numeric salt mixed into the hashed text.

    Returns
    -------
    int
        Absolute value of the signed 32-bit accumulator, in ``[0, 2**31]``.
    """
    acc = 0
    for code in _utf16_code_units(f"{value}:{salt}"):
        acc = (acc * 31 + code) & _MASK_32

    if acc & _SIGN_BIT:
        acc -= 1 << 32
    return abs(acc)
