#!/usr/bin/env python3

# Copyright (C) 2024-2026 The adaptorsig developers
#
# This file is part of adaptorsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of adaptorsig including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"""Number theory and modular arithmetic functions.

The extended Euclidean algorithm is from
https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm

Square roots are only supported for primes equal to 3 mod 4,
which is the secp256k1 case.
None of these functions is constant-time.
"""

from typing import Optional, Tuple

from adaptorsig.exceptions import AdaptorSigValueError, DivisionByZeroError
from adaptorsig.utils import int_repr


def xgcd(a: int, b: int) -> Tuple[int, int, int]:
    """Return (g, x, y) such that a*x + b*y = g = gcd(a, b)."""

    x0, x1, y0, y1 = 0, 1, 1, 0
    while a != 0:
        q, b, a = b // a, a, b % a
        y0, y1 = y1, y0 - q * y1
        x0, x1 = x1, x0 - q * x1
    return b, x0, y0


def mod_inv(a: int, m: int) -> int:
    """Return the inverse of a (mod m). m does not have to be a prime.

    DivisionByZeroError is raised if a is a multiple of m,
    AdaptorSigValueError if a and m are not coprime.
    """

    a %= m
    if a == 0:
        raise DivisionByZeroError(f"no inverse for zero mod {int_repr(m)}")
    g, x, _ = xgcd(a, m)
    if g == 1:
        return x % m
    raise AdaptorSigValueError(f"no inverse for {int_repr(a)} mod {int_repr(m)}")


def sqrt_exponent(p: int) -> int:
    """Return the (p + 1) / 4 exponent used for square roots mod p.

    p must be a prime equal to 3 mod 4: in that case,
    if a is a quadratic residue, a^((p + 1) / 4) is one of its roots.
    """

    if p % 4 != 3:
        raise AdaptorSigValueError(f"field prime is not equal to 3 mod 4: {int_repr(p)}")
    return (p + 1) >> 2


def mod_sqrt(a: int, p: int, exponent: Optional[int] = None) -> int:
    """Return a square root (mod p) of a; p must be a prime equal to 3 mod 4.

    Solve the equation:
        x^2 = a mod p

    and return x. Note that p - x is also a root.
    The (p + 1) / 4 exponent can be passed in, if already available.
    """

    if exponent is None:
        exponent = sqrt_exponent(p)
    a %= p
    r = pow(a, exponent, p)
    # the candidate fails if a is a quadratic non-residue
    if r * r % p != a:
        raise AdaptorSigValueError(f"no root for {int_repr(a)} mod {int_repr(p)}")
    return r
