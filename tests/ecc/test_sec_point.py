#!/usr/bin/env python3

# Copyright (C) 2024-2026 The adaptorsig developers
#
# This file is part of adaptorsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of adaptorsig including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"Tests for the `adaptorsig.ecc.sec_point` module."

import pytest

from adaptorsig.alias import INF
from adaptorsig.ecc.curve import mult, secp256k1
from adaptorsig.ecc.sec_point import (
    bytes_from_point,
    bytes_from_scalar,
    bytes_from_xonly,
    point_from_octets,
    point_from_xonly,
)
from adaptorsig.exceptions import (
    AdaptorSigValueError,
    LiftError,
    MalformedInputError,
    OutOfRangeError,
    PointNotOnCurveError,
)
from tests.ecc.test_curve import low_card_curves

G_BYTES = bytes.fromhex(
    "79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798"
    "483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8"
)


def test_point_codec() -> None:
    ec = secp256k1
    assert bytes_from_point(ec.G) == G_BYTES
    assert point_from_octets(G_BYTES) == ec.G
    assert point_from_octets(G_BYTES.hex()) == ec.G

    Q = mult(0xDEADBEEF)
    Q_bytes = bytes_from_point(Q)
    assert len(Q_bytes) == 64
    assert point_from_octets(Q_bytes) == Q

    # INF is the only point serialized as all-zero bytes
    assert bytes_from_point(INF) == b"\x00" * 64
    assert point_from_octets(b"\x00" * 64) is INF

    for ec in low_card_curves.values():
        for q in range(ec.n):
            Q = mult(q, ec.G, ec)
            Q_bytes = bytes_from_point(Q, ec)
            assert len(Q_bytes) == 2 * ec.p_size
            assert point_from_octets(Q_bytes, ec) == Q


def test_point_codec_exceptions() -> None:
    err_msg = "invalid size: 63 bytes instead of 64"
    with pytest.raises(MalformedInputError, match=err_msg):
        point_from_octets(G_BYTES[:-1])
    with pytest.raises(MalformedInputError, match="invalid size: 65 bytes"):
        point_from_octets(b"\x04" + G_BYTES)

    # flip a bit of the y-coordinate
    invalid = G_BYTES[:-1] + bytes([G_BYTES[-1] ^ 1])
    with pytest.raises(PointNotOnCurveError, match="point not on curve: "):
        point_from_octets(invalid)

    # coordinates are not reduced mod p
    x_Q, y_Q = secp256k1.lift_x(1)
    invalid = (x_Q + secp256k1.p).to_bytes(32, "big") + y_Q.to_bytes(32, "big")
    with pytest.raises(PointNotOnCurveError, match="point not on curve: "):
        point_from_octets(invalid)

    with pytest.raises(PointNotOnCurveError, match="point not on curve"):
        bytes_from_point((secp256k1.G[0], secp256k1.G[1] + 1))


def test_xonly() -> None:
    ec = secp256k1
    assert bytes_from_xonly(ec.G) == G_BYTES[:32]
    assert point_from_xonly(G_BYTES[:32]) == ec.G
    assert point_from_xonly(G_BYTES[:32].hex()) == ec.G

    # the even-y point is always returned
    minus_G = ec.negate(ec.G)
    assert bytes_from_xonly(minus_G) == G_BYTES[:32]
    assert point_from_xonly(bytes_from_xonly(minus_G)) == ec.G

    with pytest.raises(AdaptorSigValueError, match="no x-only representation"):
        bytes_from_xonly(INF)

    with pytest.raises(MalformedInputError, match="invalid size: 33 bytes"):
        point_from_xonly(b"\x02" + G_BYTES[:32])

    with pytest.raises(LiftError, match="x-coordinate not in 0..p-1: "):
        point_from_xonly(b"\xff" * 32)


def test_scalar() -> None:
    assert bytes_from_scalar(0) == b"\x00" * 32
    assert bytes_from_scalar(1) == b"\x00" * 31 + b"\x01"
    n_minus_1 = secp256k1.n - 1
    assert bytes_from_scalar(n_minus_1) == n_minus_1.to_bytes(32, "big")

    with pytest.raises(OutOfRangeError, match="scalar not in 0.."):
        bytes_from_scalar(secp256k1.n)
    with pytest.raises(OutOfRangeError, match="scalar not in 0.."):
        bytes_from_scalar(-1)
