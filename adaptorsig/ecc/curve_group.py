#!/usr/bin/env python3

# Copyright (C) 2024-2026 The adaptorsig developers
#
# This file is part of adaptorsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of adaptorsig including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"""Elliptic CurveGroup class and functions.

Note that CurveGroup does not have to be a cyclic subgroup.
For the cyclic subgroup of prime order with its generator,
see the adaptorsig.ecc.curve module.

Points are in affine coordinates: a finite point is a tuple[int, int],
the point at infinity is the INF singleton.
Nothing here is constant-time.
"""

from adaptorsig.alias import INF, AffinePoint, Integer
from adaptorsig.ecc.field import PrimeField
from adaptorsig.exceptions import (
    AdaptorSigTypeError,
    AdaptorSigValueError,
    LiftError,
    PointNotOnCurveError,
)
from adaptorsig.utils import HEX_THRESHOLD, hex_string, int_from_integer, int_repr


class CurveGroup:
    """Finite group of the points of an elliptic curve over Fp.

    The elliptic curve is the set of points (x, y)
    that are solutions to a Weierstrass equation y^2 = x^3 + a*x + b,
    with x, y, a, and b in Fp (p being a prime),
    together with a point at infinity INF.
    The constants a, b must satisfy the relationship
    4 a^3 + 27 b^2 ≠ 0.

    The group is defined by the point addition group law.

    The object is immutable: its parameters cannot be reassigned.
    """

    def __init__(self, p: Integer, a: Integer, b: Integer) -> None:
        # Parameters are checked according to SEC 1 v.2 3.1.1.2.1

        p = int_from_integer(p)
        a = int_from_integer(a)
        b = int_from_integer(b)

        # 1) check that p is a prime
        # Fermat test will do as _probabilistic_ primality test...
        if p < 2 or p % 2 == 0 or pow(2, p - 1, p) != 1:
            raise AdaptorSigValueError(f"p is not prime: {int_repr(p)}")
        # even/odd y-coordinate lifting needs (p + 1) / 4 square roots
        if p % 4 != 3:
            raise AdaptorSigValueError(f"p is not equal to 3 mod 4: {int_repr(p)}")

        self.p = p
        self.fp = PrimeField(p)
        # byte-length
        self.p_size = self.fp.size

        # 2. check that a and b are integers in the interval [0, p−1]
        for name, value in (("a", a), ("b", b)):
            if value < 0:
                raise AdaptorSigValueError(f"negative {name}: {value}")
            if p <= value:
                err_msg = f"p <= {name}: {int_repr(p)} <= {int_repr(value)}"
                raise AdaptorSigValueError(err_msg)

        # 3. Check that 4*a^3 + 27*b^2 ≠ 0 (mod p)
        d = 4 * a * a * a + 27 * b * b
        if d % p == 0:
            raise AdaptorSigValueError("zero discriminant")
        self._a = a
        self._b = b

    def __setattr__(self, name: str, value: object) -> None:
        if name in self.__dict__:
            raise AdaptorSigTypeError(f"read-only curve parameter: {name}")
        super().__setattr__(name, value)

    def __str__(self) -> str:
        result = "Curve"
        if self.p > HEX_THRESHOLD:
            result += f"\n p   = {hex_string(self.p)}"
        else:
            result += f"\n p   = {self.p}"

        if self._a > HEX_THRESHOLD or self._b > HEX_THRESHOLD:
            result += f"\n a   = {hex_string(self._a)}"
            result += f"\n b   = {hex_string(self._b)}"
        else:
            result += f"\n a   = {self._a}"
            result += f"\n b   = {self._b}"

        return result

    def __repr__(self) -> str:
        return f"Curve({int_repr(self.p)}, {int_repr(self._a)}, {int_repr(self._b)})"

    # methods using p: they could become functions

    def negate(self, Q: AffinePoint) -> AffinePoint:
        """Return the opposite point.

        The input point is not checked to be on the curve.
        """
        if Q is INF:
            return INF
        if isinstance(Q, tuple) and len(Q) == 2:
            return Q[0], (self.p - Q[1]) % self.p
        raise AdaptorSigTypeError("not a point")

    # methods using _a, _b, p

    def add(self, Q1: AffinePoint, Q2: AffinePoint) -> AffinePoint:
        """Return the sum of two points.

        The input points must be on the curve.
        """

        self.require_on_curve(Q1)
        self.require_on_curve(Q2)
        return self.add_aff(Q1, Q2)

    def add_aff(self, Q: AffinePoint, R: AffinePoint) -> AffinePoint:
        # points are assumed to be on curve

        if Q is INF:
            return R
        if R is INF:
            return Q

        if R[0] == Q[0]:
            # opposite points, or Q is a point of order two
            if Q[1] == 0 or (Q[1] + R[1]) % self.p == 0:
                return INF
            return self.double_aff(Q)

        lam = (R[1] - Q[1]) * self.fp.inv(R[0] - Q[0])
        x = lam * lam - Q[0] - R[0]
        y = lam * (Q[0] - x) - Q[1]
        return x % self.p, y % self.p

    def double_aff(self, Q: AffinePoint) -> AffinePoint:
        # point is assumed to be on curve

        if Q is INF or Q[1] == 0:
            return INF

        lam = (3 * Q[0] * Q[0] + self._a) * self.fp.inv(2 * Q[1])
        x = lam * lam - Q[0] - Q[0]
        y = lam * (Q[0] - x) - Q[1]
        return x % self.p, y % self.p

    def double(self, Q: AffinePoint) -> AffinePoint:
        """Return the double of a point.

        The input point must be on the curve.
        """
        self.require_on_curve(Q)
        return self.double_aff(Q)

    def _y2(self, x: int) -> int:
        # skipping a crucial check here:
        # if sqrt(y*y) does not exist, then x is not valid.
        # This is a good reason to keep this method private
        return ((x * x + self._a) * x + self._b) % self.p

    def y(self, x: int) -> int:
        """Return the y coordinate from x, as in (x, y).

        LiftError is raised if x is not a valid x-coordinate.
        """
        if not 0 <= x < self.p:
            err_msg = "x-coordinate not in 0..p-1: "
            err_msg += f"{hex_string(x)}" if x > HEX_THRESHOLD else f"{x}"
            raise LiftError(err_msg)
        try:
            return self.fp.sqrt(self._y2(x))
        except AdaptorSigValueError as e:
            err_msg = "invalid x-coordinate: "
            err_msg += f"{hex_string(x)}" if x > HEX_THRESHOLD else f"{x}"
            raise LiftError(err_msg) from e

    def y_even(self, x: int) -> int:
        """Return the even affine y-coordinate associated to x."""
        root = self.y(x)
        return self.p - root if root % 2 else root

    def require_on_curve(self, Q: AffinePoint) -> None:
        """Require the input curve Point to be on the curve.

        PointNotOnCurveError is raised if not.
        """
        if not self.is_on_curve(Q):
            raise PointNotOnCurveError("point not on curve")

    def is_on_curve(self, Q: AffinePoint) -> bool:
        """Return True if the point is on the curve.

        INF is on the curve; finite points must have
        coordinates in 0..p-1 satisfying the curve equation.
        """
        if Q is INF:
            return True
        if not isinstance(Q, tuple) or len(Q) != 2:
            raise AdaptorSigTypeError("point must be a tuple[int, int] or INF")
        if not (self.fp.is_element(Q[0]) and self.fp.is_element(Q[1])):
            return False
        return self._y2(Q[0]) == (Q[1] * Q[1] % self.p)


def mult_aff(m: int, Q: AffinePoint, ec: CurveGroup) -> AffinePoint:
    """Scalar multiplication of a curve point in affine coordinates.

    This implementation uses
    'double & add' algorithm,
    'right-to-left' binary decomposition of the m coefficient,
    affine coordinates.
    It is not constant-time: it must only be used with public scalars.

    The input point is assumed to be on curve and
    the m coefficient is not reduced mod n.
    """

    if m < 0:
        raise AdaptorSigValueError(f"negative m: {hex(m)}")

    R: AffinePoint = INF  # initialize as infinity point
    while m > 0:  # use binary representation of m
        if m & 1:  # if least significant bit is 1
            R = ec.add_aff(R, Q)  # then add current Q
        m >>= 1  # remove the bit just accounted for
        Q = ec.double_aff(Q)  # double Q for next step
    return R
