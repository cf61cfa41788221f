"""Textbook RSA in an Academic Sense.

Provides the number theory behind RSA, the PKCS#1 octet-string conversions and bare RSA primitives, and key pair
objects tying them into encryption, decryption, signing and verification. Key pairs can be generated in pure
Python or through the `cryptography` package, and exported to PKCS#1 (Public Key) and PKCS#8 (Private Key).

Typical usage example:

    pair = KeyPair(Key(3233, 2753), Key(3233, 17))
    c = pair.encrypt(65)
    m = pair.decrypt(c)
    big = KeyPair.generate(2048, backend="cryptography")
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from rsakit.backends import Backend
from rsakit.backends import CryptographyBackend
from rsakit.backends import get_backend
from rsakit.keygen import generate_key_pair
from rsakit.keygen import generate_primes
from rsakit.pkcs1 import i2osp
from rsakit.pkcs1 import os2ip
from rsakit.pkcs1 import rsadp
from rsakit.pkcs1 import rsaep
from rsakit.pkcs1 import rsasp1
from rsakit.pkcs1 import rsavp1
from rsakit.rsa import Key
from rsakit.rsa import KeyPair

__version__ = "0.1.0"
__all__ = [
    "Key",
    "KeyPair",
    "Backend",
    "CryptographyBackend",
    "get_backend",
    "i2osp",
    "os2ip",
    "rsaep",
    "rsadp",
    "rsasp1",
    "rsavp1",
    "generate_primes",
    "generate_key_pair",
]
