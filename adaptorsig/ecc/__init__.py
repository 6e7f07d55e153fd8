#!/usr/bin/env python3

# Copyright (C) 2024-2026 The adaptorsig developers
#
# This file is part of adaptorsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of adaptorsig including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"""Module adaptorsig.ecc."""

from adaptorsig.ecc.curve import CURVES, Curve, mult, secp256k1
from adaptorsig.ecc.curve_group import CurveGroup, mult_aff
from adaptorsig.ecc.field import PrimeField
from adaptorsig.ecc.sec_point import (
    bytes_from_point,
    bytes_from_scalar,
    bytes_from_xonly,
    point_from_octets,
    point_from_xonly,
)

__all__ = [
    "CURVES",
    "Curve",
    "mult",
    "secp256k1",
    "CurveGroup",
    "mult_aff",
    "PrimeField",
    "bytes_from_point",
    "bytes_from_scalar",
    "bytes_from_xonly",
    "point_from_octets",
    "point_from_xonly",
]
