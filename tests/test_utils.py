#!/usr/bin/env python3

# Copyright (C) 2024-2026 The adaptorsig developers
#
# This file is part of adaptorsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of adaptorsig including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"Tests for the `adaptorsig.utils` module."

import pickle
import secrets

import pytest

from adaptorsig.alias import INF, Infinity
from adaptorsig.exceptions import AdaptorSigValueError, MalformedInputError
from adaptorsig.utils import bytes_from_octets, hex_string, int_from_integer, int_repr


def test_int_from_integer() -> None:
    for i in (
        secrets.randbits(256 - 8),
        0x0B6CA75B7D3076C561958CCED813797F6D2275C7F42F3856D007D587769A90,
    ):
        assert i == int_from_integer(i)
        assert i == int_from_integer(" " + hex(i).upper())
        assert -i == int_from_integer(hex(-i).upper() + " ")
        assert i == int_from_integer(hex_string(i))
        assert i == int_from_integer(i.to_bytes(32, byteorder="big", signed=False))


def test_hex_string() -> None:
    int_ = 34492435054806958080
    assert hex_string(int_) == "01 DEADBEEF 00000000"
    assert hex_string(hex(int_).lower()) == "01 DEADBEEF 00000000"

    a_str = "01de adbeef00000000"
    assert hex_string(a_str) == "01 DEADBEEF 00000000"
    a_bytes = bytes.fromhex(a_str)
    assert hex_string(a_bytes) == "01 DEADBEEF 00000000"

    # invalid hex-string: odd number of hex digits
    a_str = "1deadbeef00000000"
    with pytest.raises(ValueError):
        hex_string(a_str)

    int_ = -1
    with pytest.raises(AdaptorSigValueError, match="negative integer: "):
        hex_string(int_)


def test_int_repr() -> None:
    assert int_repr(0) == "0"
    assert int_repr(0xFFFFFFFF) == "4294967295"
    assert int_repr(0x1FFFFFFFF) == "'01 FFFFFFFF'"


def test_bytes_from_octets() -> None:
    data = b"\x01\x02\x03"
    assert bytes_from_octets(data) == data
    assert bytes_from_octets(data.hex()) == data
    assert bytes_from_octets(" 010203 ") == data
    assert bytes_from_octets(data, 3) == data
    assert bytes_from_octets(data, (2, 3)) == data
    assert bytes_from_octets(bytearray(data), 3) == data  # type: ignore

    with pytest.raises(MalformedInputError, match="invalid size: 3 bytes instead of 4"):
        bytes_from_octets(data, 4)
    with pytest.raises(MalformedInputError, match="invalid size: 3 bytes instead of "):
        bytes_from_octets(data.hex(), [32, 64])


def test_infinity() -> None:
    assert Infinity() is INF
    assert repr(INF) == "INF"
    assert INF != (0, 0)
    assert pickle.loads(pickle.dumps(INF)) is INF
