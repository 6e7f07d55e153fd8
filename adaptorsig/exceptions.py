#!/usr/bin/env python3

# Copyright (C) 2024-2026 The adaptorsig developers
#
# This file is part of adaptorsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of adaptorsig including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"""Exception classes.

These are only meant to discriminate between Exceptions being raised
by adaptorsig from those raised by other codebase,
and to tell apart the reasons a verification could fail.

Users are usually better off just dealing with the regular
ValueError, TypeError, and RuntimeError
from which the adaptorsig versions are derived.
"""


class AdaptorSigValueError(ValueError):
    pass


class AdaptorSigTypeError(TypeError):
    pass


class AdaptorSigRuntimeError(RuntimeError):
    pass


class MalformedInputError(AdaptorSigValueError):
    "Wrong byte length for a serialized value."


class OutOfRangeError(AdaptorSigValueError):
    "Field element not lower than p or scalar not lower than n."


class LiftError(AdaptorSigValueError):
    "No curve point has the given x-coordinate."


class PointNotOnCurveError(AdaptorSigValueError):
    "The coordinates do not satisfy the curve equation."


class DivisionByZeroError(AdaptorSigValueError):
    "Zero has no modular inverse."


class VerificationError(AdaptorSigRuntimeError):
    "The verification equation does not hold."
