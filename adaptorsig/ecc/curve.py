#!/usr/bin/env python3

# Copyright (C) 2024-2026 The adaptorsig developers
#
# This file is part of adaptorsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of adaptorsig including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"""Elliptic curve of prime order and the secp256k1 parameters.

A Curve is an immutable configuration value: it is built once
and then passed (as the ec argument) to every function needing it,
with secp256k1 as default.
"""

from math import sqrt
from typing import Dict, Optional

from adaptorsig.alias import INF, AffinePoint, Integer, Point
from adaptorsig.ecc.curve_group import CurveGroup, mult_aff
from adaptorsig.ecc.field import PrimeField
from adaptorsig.exceptions import AdaptorSigValueError
from adaptorsig.utils import HEX_THRESHOLD, hex_string, int_from_integer, int_repr


class Curve(CurveGroup):
    "Prime order subgroup of the points of an elliptic curve over Fp."

    def __init__(
        self,
        p: Integer,
        a: Integer,
        b: Integer,
        G: Point,
        n: Integer,
        h: int,
        weakness_check: bool = True,
    ) -> None:

        super().__init__(p, a, b)

        # 2. check that xG and yG are integers in the interval [0, p−1]
        # 4. Check that yG^2 = xG^3 + a*xG + b (mod p)
        if not isinstance(G, tuple) or len(G) != 2:
            raise AdaptorSigValueError("Generator must a be a tuple[int, int]")
        G = (int_from_integer(G[0]), int_from_integer(G[1]))
        if not self.is_on_curve(G):
            raise AdaptorSigValueError("Generator is not on the curve")
        self.G = G

        n = int_from_integer(n)
        # 5. Check that n is prime.
        if n < 2 or n % 2 == 0 or pow(2, n - 1, n) != 1:
            raise AdaptorSigValueError(f"n is not prime: {int_repr(n)}")
        delta = int(2 * sqrt(self.p))
        # also check n with Hasse Theorem
        if h < 2 and not self.p + 1 - delta <= n <= self.p + 1 + delta:
            raise AdaptorSigValueError(f"n not in p+1-delta..p+1+delta: {int_repr(n)}")

        self.n = n
        self.fn = PrimeField(n)
        self.nlen = n.bit_length()
        self.n_size = self.fn.size

        # 7. Check that nG = INF
        if mult_aff(n, self.G, self) is not INF:
            raise AdaptorSigValueError(f"n is not the group order: {int_repr(n)}")

        # 6. Check cofactor
        exp_h = int(1 / n + delta / n + self.p / n)
        if h != exp_h:
            raise AdaptorSigValueError(f"invalid h: {h}, expected {exp_h}")
        self.h = h

        # 8. Check that n ≠ p
        if n == self.p:
            raise AdaptorSigValueError(f"n=p weak curve: {int_repr(n)}")

        if weakness_check:
            # 8. Check that p^i % n ≠ 1 for all 1≤i<100
            for i in range(1, 100):
                if pow(self.p, i, n) == 1:
                    raise UserWarning("weak curve")

    def __str__(self) -> str:
        result = super().__str__()
        if self.p > HEX_THRESHOLD:
            result += f"\n x_G = {hex_string(self.G[0])}"
            result += f"\n y_G = {hex_string(self.G[1])}"
        else:
            result += f"\n x_G = {self.G[0]}"
            result += f"\n y_G = {self.G[1]}"
        if self.n > HEX_THRESHOLD:
            result += f"\n n   = {hex_string(self.n)}"
        else:
            result += f"\n n   = {self.n}"
        result += f"\n h = {self.h}"
        return result

    def __repr__(self) -> str:
        result = super().__repr__()[:-1]
        result += f", ({int_repr(self.G[0])}, {int_repr(self.G[1])})"
        result += f", {int_repr(self.n)}, {self.h})"
        return result

    def lift_x(self, x: int) -> Point:
        """Return the curve point with x-coordinate x and even y.

        This is the BIP340 lift_x: it never returns INF
        and LiftError is raised if x is not in 0..p-1
        or x^3 + a*x + b is a quadratic non-residue.
        """
        return x, self.y_even(x)

    # BIP340 name
    lift_x_even_y = lift_x


_P = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
_N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
_GX = 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798
_GY = 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8

# SEC 2 v.2 section 2.4.1
secp256k1 = Curve(_P, 0, 7, (_GX, _GY), _N, 1)

CURVES: Dict[str, Curve] = {"secp256k1": secp256k1}


def mult(
    m: Integer, Q: Optional[AffinePoint] = None, ec: Curve = secp256k1
) -> AffinePoint:
    """Point multiplication, implemented using 'double and add'.

    Computations use affine coordinates and are not constant-time.
    The point Q defaults to the curve generator and must be on curve.
    m is not reduced mod n.
    """
    Q = ec.G if Q is None else Q
    ec.require_on_curve(Q)
    return mult_aff(int_from_integer(m), Q, ec)
