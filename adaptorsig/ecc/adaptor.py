#!/usr/bin/env python3

# Copyright (C) 2024-2026 The adaptorsig developers
#
# This file is part of adaptorsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of adaptorsig including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"""BIP340-Schnorr adaptor signatures.

An adaptor pre-signature (r, s') over msg is valid for the x-only public key
x_Q relative to the adaptor point T if, with R = lift_x(r) and R' = R + T:

    e = TaggedHash('BIP0340/challenge', x_R'||x_Q||msg) mod n
    s'G - eQ = R

i.e. it is the BIP340 verification equation with the challenge bound to
the tweaked nonce point R' instead of R.
Turning it into a valid signature requires the knowledge of t,
the discrete logarithm of T; conversely, given the pre-signature and
the completed signature (r, s) with s = s' + t, anyone can extract
the secret t = s - s' (mod n).

Pre-signing is out of the scope of this package.
"""

from typing import Union

from adaptorsig.alias import INF, AffinePoint, Octets
from adaptorsig.ecc.curve import Curve, secp256k1
from adaptorsig.ecc.sec_point import point_from_octets
from adaptorsig.ecc.ssa import (
    BIP340PubKey,
    Sig,
    _assert_as_valid_,
    challenge_,
    point_from_bip340pub_key,
    sig_from_octets,
)
from adaptorsig.exceptions import AdaptorSigValueError, VerificationError
from adaptorsig.utils import hex_string

# raw x||y bytes or hex-string, tuple Point, or INF
AdaptorPoint = Union[Octets, AffinePoint]


def point_from_adaptor(T: AdaptorPoint, ec: Curve = secp256k1) -> AffinePoint:
    """Return a verified-as-on-curve adaptor point.

    INF is a valid (trivial) adaptor point.
    """
    if isinstance(T, (str, bytes)):
        return point_from_octets(T, ec)
    ec.require_on_curve(T)
    return T


def tweaked_nonce_point(r: int, T: AffinePoint, ec: Curve = secp256k1) -> AffinePoint:
    "Return R' = lift_x(r) + T."
    R = ec.lift_x(r)
    return ec.add_aff(R, T)


def assert_as_valid(
    msg: Octets,
    Q: BIP340PubKey,
    pre_sig: Union[Sig, Octets],
    T: AdaptorPoint,
    ec: Curve = secp256k1,
) -> None:
    """Raise an Error if the pre-signature is not valid for the adaptor T.

    The error type tells the failure reason: MalformedInputError,
    OutOfRangeError, LiftError, PointNotOnCurveError, or VerificationError.
    """
    pre_sig = sig_from_octets(pre_sig, ec)
    ec = pre_sig.ec

    x_Q, y_Q = point_from_bip340pub_key(Q, ec)

    T = point_from_adaptor(T, ec)

    R_tweaked = tweaked_nonce_point(pre_sig.r, T, ec)
    # INF has no x-coordinate to commit to
    if R_tweaked is INF:
        raise VerificationError("R + T is INF")

    c = challenge_(msg, x_Q, R_tweaked[0], ec)
    _assert_as_valid_(c, (x_Q, y_Q), pre_sig.r, pre_sig.s, ec)


def verify(
    msg: Octets,
    Q: BIP340PubKey,
    pre_sig: Union[Sig, Octets],
    T: AdaptorPoint,
    ec: Curve = secp256k1,
) -> bool:
    """Verify the adaptor pre-signature of msg relative to T."""
    # all kind of Exceptions are catched because
    # verify must always return a bool
    try:
        assert_as_valid(msg, Q, pre_sig, T, ec)
    except Exception:  # pylint: disable=broad-except
        return False

    return True


def extract(
    sig: Union[Sig, Octets], pre_sig: Union[Sig, Octets], ec: Curve = secp256k1
) -> int:
    """Return the adaptor secret t = s - s' (mod n).

    The signature and the pre-signature must share the same r,
    otherwise they are not a matching pair and an error is raised.
    The result is in 0..n-1.
    """
    sig = sig_from_octets(sig, ec)
    pre_sig = sig_from_octets(pre_sig, ec)
    if sig.ec is not pre_sig.ec:
        raise AdaptorSigValueError("not the same curve for both signatures")
    if sig.r != pre_sig.r:
        err_msg = "mismatched r: "
        err_msg += f"'{hex_string(sig.r)}' instead of '{hex_string(pre_sig.r)}'"
        raise AdaptorSigValueError(err_msg)

    return sig.ec.fn.sub(sig.s, pre_sig.s)


def complete(pre_sig: Union[Sig, Octets], t: int, ec: Curve = secp256k1) -> Sig:
    """Return the signature (r, s' + t) completing the pre-signature.

    t is the adaptor secret, i.e. the discrete logarithm of T:
    this is the inverse of extract.
    """
    pre_sig = sig_from_octets(pre_sig, ec)
    fn = pre_sig.ec.fn
    t = fn.require_element(t, "adaptor secret")
    return Sig(pre_sig.r, fn.add(pre_sig.s, t), pre_sig.ec)
