#!/usr/bin/env python3

# Copyright (C) 2024-2026 The adaptorsig developers
#
# This file is part of adaptorsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of adaptorsig including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Tuple, Union

# Octets are a sequence of eight-bit bytes or a hex-string (not text string)
#
# hex-strings are strings that can be converted to bytes using bytes.fromhex,
# e.g.:
# "deadbeef"
# "dead beef"
# "DFF1D77F2A671C5F36183726DB2341BE58FEAE1DA2DECED843240F7B502BA659"
#
# use adaptorsig.utils.bytes_from_octets to convert Octets to bytes
#
# Octets are used for x-only public keys (32 bytes),
# ssa.Sig (BIP340 serialization of Schnorr signature, 64 bytes),
# raw affine points (64 bytes), command call data, etc.
Octets = Union[bytes, str]

# hex-string or bytes representation of an int
Integer = Union[bytes, str, int]


class Infinity:
    """The point at infinity, neutral element of the group law.

    It is a singleton: there is a single INF object and
    it must be compared by identity (Q is INF).
    It is never represented by a coordinate pair.
    """

    _instance = None

    def __new__(cls) -> "Infinity":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "INF"

    def __reduce__(self) -> str:
        return "INF"


INF = Infinity()

# Elliptic curve finite point in affine coordinates.
# Warning: to make Point a NamedTuple would slow down the code
Point = Tuple[int, int]

# Either a finite point or INF
AffinePoint = Union[Point, Infinity]
