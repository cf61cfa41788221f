"""PKCS#1 v2.2 data conversion and cryptographic primitives.

Provides the I2OSP/OS2IP octet-string conversions and the four bare RSA primitives (RSAEP, RSADP, RSASP1, RSAVP1)
of RFC 8017 sections 4 and 5. No padding is applied anywhere in this module.

Keys are anything that unpacks into a (modulus, exponent) pair, so both `rsakit.Key` and plain tuples work.

Typical usage example:

    c = rsaep((3233, 17), os2ip(b"A"))
    m = rsadp((3233, 2753), c)
    i2osp(m, 1)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from collections.abc import Sequence

from rsakit import numtheory

KeyLike = Sequence[int]


def i2osp(x: int, length: int | None = None) -> bytes:
    """Converts a non-negative integer to an octet string of a fixed length. (RFC 8017, 4.1)

    Args:
        x: The integer to convert.
        length: The target length of the octet string, left-padded with zero octets.
            If omitted, the shortest length able to hold `x` is used, never less than one octet.

    Returns:
        The big-endian octet string of exactly `length` bytes.

    Raises:
        ValueError: If `x` is negative or `x >= 256**length`.
    """
    if x < 0:
        raise ValueError("Integer must be non-negative")
    if length is None:
        length = max(1, (x.bit_length() + 7) // 8)
    if x >= 256**length:
        raise ValueError("Integer too large")
    return x.to_bytes(length, byteorder="big", signed=False)


def os2ip(octets: bytes) -> int:
    """Converts an octet string to a non-negative integer. (RFC 8017, 4.2)

    An empty octet string converts to 0.
    """
    return int.from_bytes(octets, byteorder="big", signed=False)


def _apply(key: KeyLike, representative: int, what: str) -> int:
    n, exponent = key
    if not 0 <= representative < n:
        raise ValueError(f"{what} representative out of range")
    return numtheory.modpow(representative, exponent, n)


def rsaep(key: KeyLike, m: int) -> int:
    """RSA encryption primitive. (RFC 8017, 5.1.1)

    Args:
        key: RSA public key (n, e).
        m: Message representative, an integer in [0, n - 1].

    Returns:
        The ciphertext representative m^e mod n.

    Raises:
        ValueError: If `m` is out of range.
    """
    return _apply(key, m, "Message")


def rsadp(key: KeyLike, c: int) -> int:
    """RSA decryption primitive. (RFC 8017, 5.1.2)

    Args:
        key: RSA private key (n, d).
        c: Ciphertext representative, an integer in [0, n - 1].

    Returns:
        The message representative c^d mod n.

    Raises:
        ValueError: If `c` is out of range.
    """
    return _apply(key, c, "Ciphertext")


def rsasp1(key: KeyLike, m: int) -> int:
    """RSA signature primitive, RSADP under another name. (RFC 8017, 5.2.1)

    Raises:
        ValueError: If `m` is out of range.
    """
    return _apply(key, m, "Message")


def rsavp1(key: KeyLike, s: int) -> int:
    """RSA verification primitive, RSAEP under another name. (RFC 8017, 5.2.2)

    Raises:
        ValueError: If `s` is out of range.
    """
    return _apply(key, s, "Signature")
