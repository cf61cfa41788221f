"""Pure-Python key generation, mainly focusing on the generation of random probable primes.

This module generates IFC key pairs roughly based on FIPS 186-5. Unlike the standard we permit toy key sizes, as
small keys are the whole point of walking through RSA by hand; anything below 2048 bits is flagged with a warning.

Typical usage example:

    p, q = generate_primes(2048)
    n, e, d = generate_key_pair(64, 17)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import logging
import secrets
import warnings

from rsakit import numtheory

logger = logging.getLogger(__name__)

DEFAULT_PUBLIC_EXPONENT: int = 65537
SECURE_KEY_SIZE: int = 2048
MINIMUM_KEY_SIZE: int = 16
_MINIMUM_PRIME_SEPARATION: int = 100


def _generate_probable_prime(size: int, pub: int = DEFAULT_PUBLIC_EXPONENT, prm_p: int | None = None) -> int:
    """Generate a probable prime number of the specified bit size.

    Implements parts of the FIPS 186-5 protocol for generation of probable primes, shared between p and q.

    Args:
        size: The size of the prime to generate in bits.
        pub: The public exponent the prime must be compatible with.
        prm_p: The other prime in the pair if this is the second generation. Adds a separation test.
            Optional, if not provided generates 1st prime.

    Returns:
        A probable prime number.

    Raises:
        RuntimeError: If generation loops way beyond a reasonable time and a bit.
    """
    ml = 1 if prm_p is None else 2
    rep_cap = size * 10 * ml
    # Top two bits make p*q exactly 2*size bits long, the low bit skips even candidates.
    msk = (1 << size - 1) | (1 << size - 2) | 1
    for attempt in range(rep_cap):
        byts = secrets.randbits(size) | msk
        if prm_p is not None:
            if byts == prm_p:
                continue
            if size > _MINIMUM_PRIME_SEPARATION and abs(prm_p - byts) <= (1 << (size - _MINIMUM_PRIME_SEPARATION)):
                continue
        if numtheory.gcd(byts - 1, pub) == 1 and numtheory.is_prime(byts):
            logger.debug("Found %d-bit probable prime after %d attempts", size, attempt + 1)
            return byts
    raise RuntimeError(f"Run an improbable {rep_cap} amount of loops with no prime found. "
                       "Check system random number generator.")


def _check_parameters(size: int, pub: int) -> None:
    if size < MINIMUM_KEY_SIZE:
        raise ValueError(f"Size must be at least {MINIMUM_KEY_SIZE}.")
    if size % 2 != 0:
        raise ValueError("Size must be an even number.")
    if pub % 2 == 0 or not 3 <= pub < 2**256:
        raise ValueError("Public exponent does not meet requirements.")
    if size < SECURE_KEY_SIZE:
        warnings.warn(f"Keys below {SECURE_KEY_SIZE} bits are unsecure! Please use with care.", RuntimeWarning)


def generate_primes(size: int, pub: int = DEFAULT_PUBLIC_EXPONENT) -> tuple[int, int]:
    """Generates an IFC-suitable pair of distinct prime numbers.

    Args:
        size: The key size to generate the prime pair for. Must be even and at least `MINIMUM_KEY_SIZE`.
        pub: The public exponent. Must be odd and in range [3, 2**256).

    Returns:
        A pair of probable primes of `size // 2` bits each, both compatible with `pub`.

    Raises:
        ValueError: If `size` or `pub` do not meet requirements.
    """
    _check_parameters(size, pub)
    p = _generate_probable_prime(size // 2, pub)
    q = _generate_probable_prime(size // 2, pub, p)
    return p, q


def generate_key_pair(size: int, pub: int = DEFAULT_PUBLIC_EXPONENT) -> tuple[int, int, int]:
    """Generates an RSA key pair.

    The private exponent is the inverse of `pub` modulo lcm(p - 1, q - 1), as FIPS 186-5 prescribes.

    Args:
        size: The key size in bits. Must be even.
        pub: The public exponent. Defaults (and recommended) to 65537.

    Returns:
        The tuple (modulus, public exponent, private exponent).
    """
    p, q = generate_primes(size, pub)
    n = p * q
    totient = (p - 1) * (q - 1) // numtheory.gcd(p - 1, q - 1)
    d = numtheory.modinv(pub, totient)
    del p, q
    logger.debug("Generated %d-bit key pair", n.bit_length())
    return n, pub, d
