#!/usr/bin/env python3

# Copyright (C) 2024-2026 The adaptorsig developers
#
# This file is part of adaptorsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of adaptorsig including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"Tests for the `adaptorsig.exceptions` module."

import pytest

from adaptorsig.ecc.curve import secp256k1
from adaptorsig.ecc.ssa import Sig
from adaptorsig.exceptions import (
    AdaptorSigRuntimeError,
    AdaptorSigValueError,
    DivisionByZeroError,
    LiftError,
    MalformedInputError,
    OutOfRangeError,
    PointNotOnCurveError,
    VerificationError,
)


def test_hierarchy() -> None:
    for err in (
        MalformedInputError,
        OutOfRangeError,
        LiftError,
        PointNotOnCurveError,
        DivisionByZeroError,
    ):
        assert issubclass(err, AdaptorSigValueError)
        assert issubclass(err, ValueError)
    assert issubclass(VerificationError, AdaptorSigRuntimeError)
    assert issubclass(VerificationError, RuntimeError)


def test_builtin_catch() -> None:
    # callers can just deal with the regular ValueError
    with pytest.raises(ValueError):
        Sig(secp256k1.p, 0)
    with pytest.raises(ValueError):
        secp256k1.fp.inv(0)
