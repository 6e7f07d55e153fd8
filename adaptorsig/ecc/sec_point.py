#!/usr/bin/env python3

# Copyright (C) 2024-2026 The adaptorsig developers
#
# This file is part of adaptorsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of adaptorsig including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"""Raw and x-only point representation, scalar serialization.

- raw: x-coordinate || y-coordinate, each p-size big-endian bytes
  (64 bytes for secp256k1), with INF serialized as all-zero bytes:
  (0, 0) is never on a curve with b ≠ 0, so there is no ambiguity
- x-only (BIP340): the p-size big-endian x-coordinate of the even-y point
- scalar: n-size big-endian bytes, zero-padded
"""

from adaptorsig.alias import INF, AffinePoint, Octets, Point
from adaptorsig.ecc.curve import Curve, secp256k1
from adaptorsig.exceptions import AdaptorSigValueError, PointNotOnCurveError
from adaptorsig.utils import bytes_from_octets, hex_string


def bytes_from_point(Q: AffinePoint, ec: Curve = secp256k1) -> bytes:
    "Return the raw x||y serialization of a curve point."

    # check that Q is a point and that is on curve
    ec.require_on_curve(Q)

    if Q is INF:
        return b"\x00" * (2 * ec.p_size)

    return Q[0].to_bytes(ec.p_size, byteorder="big", signed=False) + Q[1].to_bytes(
        ec.p_size, byteorder="big", signed=False
    )


def point_from_octets(data: Octets, ec: Curve = secp256k1) -> AffinePoint:
    """Return a point that belongs to the curve from its raw x||y bytes.

    All-zero bytes are INF; coordinates are not reduced mod p,
    so they must already be field elements.
    """

    data = bytes_from_octets(data, 2 * ec.p_size)
    if not any(data):
        return INF

    x_Q = int.from_bytes(data[: ec.p_size], byteorder="big", signed=False)
    y_Q = int.from_bytes(data[ec.p_size :], byteorder="big", signed=False)
    Q = x_Q, y_Q
    if ec.is_on_curve(Q):
        return Q
    raise PointNotOnCurveError(
        f"point not on curve: ('{hex_string(x_Q)}', '{hex_string(y_Q)}')"
    )


def bytes_from_xonly(Q: AffinePoint, ec: Curve = secp256k1) -> bytes:
    "Return the BIP340 x-only serialization of a finite curve point."

    ec.require_on_curve(Q)
    if Q is INF:
        raise AdaptorSigValueError("no x-only representation for infinity point")
    return Q[0].to_bytes(ec.p_size, byteorder="big", signed=False)


def point_from_xonly(x_Q: Octets, ec: Curve = secp256k1) -> Point:
    """Return the even-y curve point from its BIP340 x-only serialization.

    MalformedInputError is raised for a wrong size,
    LiftError if there is no point with that x-coordinate.
    """

    x_Q = bytes_from_octets(x_Q, ec.p_size)
    return ec.lift_x(int.from_bytes(x_Q, byteorder="big", signed=False))


def bytes_from_scalar(k: int, ec: Curve = secp256k1) -> bytes:
    "Return the zero-padded big-endian serialization of a scalar."

    return ec.fn.require_element(k, "scalar").to_bytes(
        ec.n_size, byteorder="big", signed=False
    )
