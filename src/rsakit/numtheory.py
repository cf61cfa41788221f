"""Number theory helpers backing the RSA primitives.

Everything here is a pure function over Python integers: greatest common divisors, the extended Euclidean
algorithm, modular inverses and exponentiation, primality testing, factorization and the Euler totient. The only
shared state is a cache of small primes produced by the Sieve of Eratosthenes.

Typical usage example:

    modpow(4, 13, 497)
    modinv(271, 383)
    list(factorize(12))
    phi(10**3)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from collections.abc import Callable, Iterator
from fractions import Fraction
import math
import secrets

SMALL_PRIME_BOUND: int = 10000

# (cap, primes up to cap), always rebound as a whole.
_SMALL_PRIMES: tuple[int, list[int]] = (0, [])


def gcd(a: int, b: int) -> int:
    """Greatest common divisor, always non-negative.

    `gcd(0, 0)` is 0 and `gcd(a, 0)` is `|a|`.
    """
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def egcd(a: int, b: int) -> tuple[int, int]:
    """Implements the Extended Euclidean Algorithm.

    Finds the Bezout coefficients such that a*x + b*y = gcd(a, b). The quotients are collected on the way down and
    back-substituted afterwards, which yields the same coefficients as the textbook recursion without its depth.

    Args:
        a: The first integer.
        b: The second integer. Must not be zero.

    Returns:
        The Bezout coefficients (x, y).

    Raises:
        ZeroDivisionError: If `b` is zero.
    """
    quotients = []
    while a % b:
        quotients.append(a // b)
        a, b = b, a % b
    x, y = 0, 1
    for q in reversed(quotients):
        x, y = y, x - y * q
    return x, y


def coprime(a: int, b: int) -> bool:
    """Whether `a` and `b` share no factor other than 1."""
    return gcd(a, b) == 1


def modinv(b: int, m: int) -> int:
    """Modular multiplicative inverse of `b` modulo `m`.

    Args:
        b: The integer to invert.
        m: The modulus. Must be positive.

    Returns:
        The inverse, in range [0, m).

    Raises:
        ArithmeticError: If `m` is not positive or `b` is not coprime to `m`.
    """
    if m <= 0:
        raise ArithmeticError(f"Modulus must be positive, got {m}")
    if not coprime(b, m):
        raise ArithmeticError(f"{b} has no inverse modulo {m}")
    x, _ = egcd(b, m)
    return x % m


def modpow(base: int, exponent: int, modulus: int) -> int:
    """Performs modular exponentiation by right-to-left square-and-multiply.

    Equivalent to `base**exponent % modulus`, but every intermediate product is reduced, so memory stays bounded
    by the size of the modulus.

    Args:
        base: The base.
        exponent: The exponent. Must be non-negative.
        modulus: The modulus. Must not be zero.

    Returns:
        The residue of `base**exponent` modulo `modulus`.

    Raises:
        ZeroDivisionError: If `modulus` is zero.
        ValueError: If `exponent` is negative.
    """
    if exponent < 0:
        raise ValueError("Exponent must be non-negative, use modinv for inverses")
    result = 1 % modulus  # Raises ZeroDivisionError for a zero modulus.
    base %= modulus
    while exponent:
        if exponent & 1:
            result = (result * base) % modulus
        exponent >>= 1
        base = (base * base) % modulus
    return result


def sieve(n: int = SMALL_PRIME_BOUND) -> list[int]:
    """Implements the Sieve of Eratosthenes.

    Sieves odd candidates only, up to the square root of `n`.

    Args:
        n: The number up to which to generate primes. Must be >= 0.

    Returns:
        A list of primes up to `n`, ascending.
    """
    if n < 2:
        return []
    i_size = (n - 1) // 2
    candidate: list[bool] = [True] * i_size
    for i in range(math.isqrt(n) // 2):
        if candidate[i]:
            r = 2 * i + 3
            for j in range((r * r - 3) // 2, i_size, r):
                candidate[j] = False
    return [2] + [(no * 2 + 3) for no, ele in enumerate(candidate) if ele]


def small_primes(n: int = SMALL_PRIME_BOUND) -> list[int]:
    """Get the small primes, sieving only when the cache does not reach `n`.

    Args:
        n: The number up to which primes are required. Must be >= 0.

    Returns:
        List of primes in ascending order, covering at least every prime up to `n`.

    Raises:
        ValueError: If `n` is negative.
    """
    if n < 0:
        raise ValueError("n must be >= 0")
    global _SMALL_PRIMES
    cap, cached = _SMALL_PRIMES
    if n > cap or not cached:
        cached = sieve(n)
        if n > _SMALL_PRIMES[0]:
            _SMALL_PRIMES = (n, cached)
    return cached


def _trial_division(no: int) -> bool | None:
    """Check `no` against the known small primes.

    Returns:
        False if `no` is composite, True if `no` is proven prime, None if the small primes are exhausted.
    """
    for prime in small_primes():
        if prime * prime > no:
            return True
        if no % prime == 0:
            return False
    return None


def _miller_rabin(w: int, iters: int, randbelow: Callable[[int], int]) -> bool:
    """Perform the Miller-Rabin primality test as laid out in FIPS 186-5.

    Args:
        w: Odd integer to be tested, greater than 3.
        iters: Number of rounds to perform.
        randbelow: Source of witnesses, called as `randbelow(k)` for a value in [0, k).

    Returns:
        True if `w` is probably prime, False otherwise.
    """
    tw = w - 1
    a = (tw & -tw).bit_length() - 1
    m = tw >> a
    for _ in range(iters):
        b = randbelow(w - 3) + 2
        z = modpow(b, m, w)
        if z == 1 or z == w - 1:
            continue
        for _ in range(1, a):
            z = modpow(z, 2, w)
            if z == w - 1:
                break
            if z == 1:
                return False
        else:
            return False
    return True


def _rounds_for(candidate: int) -> int:
    bits = candidate.bit_length()
    if bits <= 512:
        return 40
    if bits <= 1024:
        return 56
    if bits <= 1536:
        return 64
    if bits <= 2048:
        return 70
    return 74


def is_prime(n: int, iters: int | None = None, randbelow: Callable[[int], int] = secrets.randbelow) -> bool:
    """Primality test: trial division by the small primes, then Miller-Rabin.

    Trial division is conclusive for anything below the square of `SMALL_PRIME_BOUND`. Larger inputs get the
    probabilistic test with the FIPS 186-5 Appendix C.1 iteration counts unless `iters` is given.

    Args:
        n: The candidate. Negative values are tested by magnitude.
        iters: Number of Miller-Rabin rounds.
        randbelow: Witness source for Miller-Rabin. Defaults to `secrets.randbelow`.

    Returns:
        True if `n` is (probably) prime, False otherwise.
    """
    n = abs(n)
    if n < 2:
        return False
    verdict = _trial_division(n)
    if verdict is not None:
        return verdict
    return _miller_rabin(n, iters if iters is not None else _rounds_for(n), randbelow)


def primes(start: int = 2) -> Iterator[int]:
    """Lazily yields every prime >= `start`, in ascending order.

    Each call starts a fresh sequence.
    """
    cached = small_primes()
    for p in cached:
        if p >= start:
            yield p
    candidate = max(start, cached[-1] + 1) | 1
    while True:
        if is_prime(candidate):
            yield candidate
        candidate += 2


def _trial_divisors() -> Iterator[int]:
    # Ascending divisors for factorization. Past the cached primes any odd number will do, as composite divisors
    # can no longer divide the already reduced cofactor.
    cached = small_primes()
    yield from cached
    candidate = cached[-1] + 2
    while True:
        yield candidate
        candidate += 2


def _factor_pairs(n: int) -> Iterator[tuple[int, int]]:
    # A prime cofactor ends the search early, rather than trial dividing up to its square root.
    if is_prime(n):
        yield n, 1
        return
    for p in _trial_divisors():
        if p * p > n:
            break
        k = 0
        while n % p == 0:
            n //= p
            k += 1
        if k:
            yield p, k
            if is_prime(n):
                break
    if n > 1:
        yield n, 1


def factorize(n: int) -> Iterator[tuple[int, int]]:
    """Prime factorization of `n` by trial division.

    Args:
        n: The integer to factorize. Negative values are factorized by magnitude.

    Returns:
        A lazy iterator of (prime, exponent) pairs in ascending prime order. Empty for 1.

    Raises:
        ZeroDivisionError: If `n` is zero.
    """
    if n == 0:
        raise ZeroDivisionError("Zero has no prime factorization")
    return _factor_pairs(abs(n))


def phi(n: int) -> int:
    """Euler's totient function.

    Uses the product formula n * prod(1 - 1/p) over the distinct prime factors, in exact rational arithmetic.
    By convention phi(0) = phi(1) = 1.

    Args:
        n: A non-negative integer.

    Returns:
        The count of integers in [1, n] coprime to `n`.

    Raises:
        ValueError: If `n` is negative.
    """
    if n < 0:
        raise ValueError(f"Totient is undefined for negative integers, got {n}")
    if n < 2:
        return 1
    if is_prime(n):
        return n - 1
    total = Fraction(n)
    for p, _ in factorize(n):
        total *= Fraction(p - 1, p)
    return round(total)


def recover_prime_factors(n: int, e: int, d: int) -> tuple[int, int]:
    """Recover the primes p and q of a two-prime modulus from its exponents.

    Follows NIST SP 800-56B Appendix C: d*e - 1 is a multiple of lambda(n), so some witness squares to a
    nontrivial root of unity modulo `n`, which shares exactly one factor with `n`.

    Args:
        n: The modulus.
        e: The public exponent.
        d: The private exponent.

    Returns:
        The factors (p, q) with p > q.

    Raises:
        ValueError: If no factor could be found, i.e. the exponents do not belong to `n`.
    """
    ktot = d * e - 1
    t = ktot
    while t % 2 == 0:
        t //= 2
    for a in range(2, 1000, 2):
        k = t
        while k < ktot:
            cand = modpow(a, k, n)
            if cand != 1 and cand != n - 1 and modpow(cand, 2, n) == 1:
                p = gcd(cand + 1, n)
                q, r = divmod(n, p)
                if r == 0:
                    return max(p, q), min(p, q)
            k *= 2
    raise ValueError("Unable to compute factors p and q from exponent d")


def log(n: int | float, base: int | float = math.e) -> float:
    """Logarithm of `n` in an arbitrary base, natural by default.

    Raises:
        ValueError: If `n` < 1 or `base` < 2.
    """
    if n < 1:
        raise ValueError(f"Logarithm argument must be >= 1, got {n}")
    if base < 2:
        raise ValueError(f"Logarithm base must be >= 2, got {base}")
    return math.log(n, base)


def log2(n: int | float) -> float:
    if n < 1:
        raise ValueError(f"Logarithm argument must be >= 1, got {n}")
    return math.log2(n)


def log256(n: int | float) -> float:
    return log(n, 256)
