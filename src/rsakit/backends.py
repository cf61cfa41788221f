"""Pluggable providers for key generation and the raw RSA primitives.

A `KeyPair` is bound to one backend at construction time. The default `Backend` is pure Python throughout:
key generation through `rsakit.keygen` and primitives through `rsakit.pkcs1`. `CryptographyBackend` hands key
generation to the OpenSSL-backed `cryptography` package and bridges key pairs to and from its key objects, while
inheriting the pure-Python primitives, since `cryptography` offers no unpadded RSA.

Typical usage example:

    backend = get_backend("cryptography")
    n, e, d = backend.generate(2048)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from collections.abc import Sequence
import logging

from cryptography.hazmat.primitives.asymmetric import rsa

from rsakit import keygen
from rsakit import pkcs1

logger = logging.getLogger(__name__)


class Backend:
    """Pure-Python backend, the default for every key pair."""

    name = "python"

    def generate(self, bits: int, public_exponent: int = keygen.DEFAULT_PUBLIC_EXPONENT) -> tuple[int, int, int]:
        """Generates fresh key material.

        Args:
            bits: The modulus size in bits.
            public_exponent: The public exponent.

        Returns:
            The tuple (modulus, public exponent, private exponent).
        """
        return keygen.generate_key_pair(bits, public_exponent)

    def encrypt(self, key: Sequence[int], m: int) -> int:
        return pkcs1.rsaep(key, m)

    def decrypt(self, key: Sequence[int], c: int) -> int:
        return pkcs1.rsadp(key, c)

    def sign(self, key: Sequence[int], m: int) -> int:
        return pkcs1.rsasp1(key, m)

    def verify(self, key: Sequence[int], s: int) -> int:
        return pkcs1.rsavp1(key, s)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"


class CryptographyBackend(Backend):
    """Backend delegating key generation to the `cryptography` package."""

    name = "cryptography"

    def generate(self, bits: int, public_exponent: int = keygen.DEFAULT_PUBLIC_EXPONENT) -> tuple[int, int, int]:
        pk = rsa.generate_private_key(public_exponent=public_exponent, key_size=bits)
        privs = pk.private_numbers()
        logger.debug("Generated %d-bit key pair through cryptography", bits)
        return privs.public_numbers.n, privs.public_numbers.e, privs.d

    def export_key(self,
                   n: int,
                   e: int | None,
                   d: int | None = None) -> rsa.RSAPrivateKey | rsa.RSAPublicKey:
        """Builds a `cryptography` key object from raw key numbers.

        A private key needs both exponents, as `cryptography` requires the prime factors and CRT values, which are
        recovered from (n, e, d).

        Args:
            n: The modulus.
            e: The public exponent.
            d: The private exponent. Optional, if omitted a public key is built.

        Returns:
            An `RSAPrivateKey` if `d` is given, an `RSAPublicKey` otherwise.

        Raises:
            ValueError: If the numbers do not form a consistent key.
        """
        if e is None:
            raise ValueError("The public exponent is required to build a cryptography key.")
        pubs = rsa.RSAPublicNumbers(e, n)
        if d is None:
            return pubs.public_key()
        p, q = rsa.rsa_recover_prime_factors(n, e, d)
        privs = rsa.RSAPrivateNumbers(p, q, d, rsa.rsa_crt_dmp1(d, p), rsa.rsa_crt_dmq1(d, q),
                                      rsa.rsa_crt_iqmp(p, q), pubs)
        return privs.private_key()

    def import_key(self, key: rsa.RSAPrivateKey | rsa.RSAPublicKey) -> tuple[int, int, int | None]:
        """Extracts (n, e, d) from a `cryptography` key object, `d` being None for public keys."""
        if isinstance(key, rsa.RSAPrivateKey):
            privs = key.private_numbers()
            return privs.public_numbers.n, privs.public_numbers.e, privs.d
        if isinstance(key, rsa.RSAPublicKey):
            pubs = key.public_numbers()
            return pubs.n, pubs.e, None
        raise TypeError(f"Unsupported key type: {type(key).__name__}")


BACKENDS: dict[str, type[Backend]] = {
    Backend.name: Backend,
    CryptographyBackend.name: CryptographyBackend,
}


def get_backend(backend: Backend | str | None = None) -> Backend:
    """Resolves a backend instance.

    Args:
        backend: A backend instance, a registered backend name, or None for the pure-Python default.

    Returns:
        The backend instance.

    Raises:
        ValueError: If no backend is registered under the given name.
    """
    if backend is None:
        return Backend()
    if isinstance(backend, Backend):
        return backend
    try:
        return BACKENDS[backend]()
    except KeyError:
        raise ValueError(f"Unknown backend: {backend!r}") from None
