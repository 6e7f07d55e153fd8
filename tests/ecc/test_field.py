#!/usr/bin/env python3

# Copyright (C) 2024-2026 The adaptorsig developers
#
# This file is part of adaptorsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of adaptorsig including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"Tests for the `adaptorsig.ecc.field` module."

import pytest

from adaptorsig.ecc.curve import secp256k1
from adaptorsig.ecc.field import PrimeField
from adaptorsig.exceptions import (
    AdaptorSigTypeError,
    AdaptorSigValueError,
    DivisionByZeroError,
    OutOfRangeError,
)


def test_field_arithmetic() -> None:
    fp = PrimeField(23)
    assert fp.size == 1
    for a in range(23):
        assert fp.add(a, fp.neg(a)) == 0
        assert fp.sub(a, a) == 0
        assert fp.add(a, 22) == fp.sub(a, 1)
        assert fp.reduce(a + 23) == a
        assert fp.pow(a, 2) == fp.mul(a, a)
        if a:
            assert fp.mul(a, fp.inv(a)) == 1
            root = fp.sqrt(fp.mul(a, a))
            assert root in (a, 23 - a)

    # results are always reduced
    assert fp.sub(0, 1) == 22
    assert fp.neg(0) == 0
    assert fp.mul(-1, 1) == 22

    with pytest.raises(DivisionByZeroError, match="no inverse for zero mod "):
        fp.inv(0)
    with pytest.raises(AdaptorSigValueError, match="no root for "):
        fp.sqrt(22)


def test_secp256k1_fields() -> None:
    fp = secp256k1.fp
    fn = secp256k1.fn
    assert fp.m == secp256k1.p
    assert fn.m == secp256k1.n
    assert fp.size == fn.size == 32

    # p - 1 = -1 is not a square, as p = 3 mod 4
    with pytest.raises(AdaptorSigValueError, match="no root for "):
        fp.sqrt(fp.m - 1)

    # n is not 3 mod 4: no square roots there
    with pytest.raises(AdaptorSigValueError, match="not equal to 3 mod 4: "):
        fn.sqrt(4)

    assert fn.sub(1, 2) == secp256k1.n - 1
    assert fn.add(secp256k1.n - 1, 1) == 0


def test_require_element() -> None:
    fp = PrimeField(23)
    assert fp.require_element(0) == 0
    assert fp.require_element(22) == 22
    assert fp.is_element(22)
    assert not fp.is_element(23)
    assert not fp.is_element(-1)

    with pytest.raises(OutOfRangeError, match="element not in 0..22: "):
        fp.require_element(23)
    with pytest.raises(OutOfRangeError, match="scalar not in 0..22: -1"):
        fp.require_element(-1, "scalar")

    fn = secp256k1.fn
    with pytest.raises(OutOfRangeError, match="scalar s not in 0.."):
        fn.require_element(secp256k1.n, "scalar s")


def test_immutable() -> None:
    fp = PrimeField(23)
    with pytest.raises(AdaptorSigTypeError, match="read-only field parameter: m"):
        fp.m = 19
    assert fp.m == 23

    assert fp == PrimeField(23)
    assert fp != PrimeField(19)
    assert hash(fp) == hash(PrimeField(23))
    assert repr(fp) == "PrimeField(23)"
