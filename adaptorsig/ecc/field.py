#!/usr/bin/env python3

# Copyright (C) 2024-2026 The adaptorsig developers
#
# This file is part of adaptorsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of adaptorsig including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"""Modular arithmetic over a prime modulus.

A curve uses two of them: the field of coordinates (mod p)
and the ring of scalars (mod n).
Elements are plain int, always reduced to 0..m-1 by every operation;
the PrimeField object only carries the modulus.
"""

from math import ceil

from adaptorsig.ecc.number_theory import mod_inv, mod_sqrt, sqrt_exponent
from adaptorsig.exceptions import AdaptorSigTypeError, OutOfRangeError
from adaptorsig.utils import hex_string, int_repr


class PrimeField:
    "Integers modulo the prime m."

    def __init__(self, m: int) -> None:
        self.m = m
        # byte-length of an element
        self.size = ceil(m.bit_length() / 8)
        self._sqrt_exp = sqrt_exponent(m) if m % 4 == 3 else None

    def __setattr__(self, name: str, value: object) -> None:
        if name in self.__dict__:
            raise AdaptorSigTypeError(f"read-only field parameter: {name}")
        super().__setattr__(name, value)

    def __repr__(self) -> str:
        return f"PrimeField({int_repr(self.m)})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, PrimeField) and self.m == other.m

    def __hash__(self) -> int:
        return hash(self.m)

    def is_element(self, a: int) -> bool:
        return 0 <= a < self.m

    def require_element(self, a: int, what: str = "element") -> int:
        """Return a if it is in 0..m-1, raise OutOfRangeError otherwise.

        Values are never silently wrapped.
        """
        if not self.is_element(a):
            err_msg = f"{what} not in 0..{int_repr(self.m - 1)}: "
            err_msg += f"'{hex_string(a)}'" if a >= 0 else f"{a}"
            raise OutOfRangeError(err_msg)
        return a

    def reduce(self, a: int) -> int:
        return a % self.m

    def add(self, a: int, b: int) -> int:
        return (a + b) % self.m

    def sub(self, a: int, b: int) -> int:
        return (a - b) % self.m

    def neg(self, a: int) -> int:
        return -a % self.m

    def mul(self, a: int, b: int) -> int:
        return a * b % self.m

    def inv(self, a: int) -> int:
        "Return the inverse of a, raising DivisionByZeroError for zero."
        return mod_inv(a, self.m)

    def pow(self, a: int, e: int) -> int:
        return pow(a, e, self.m)

    def sqrt(self, a: int) -> int:
        "Return a square root of a, if any; m must be equal to 3 mod 4."
        return mod_sqrt(a, self.m, self._sqrt_exp)
