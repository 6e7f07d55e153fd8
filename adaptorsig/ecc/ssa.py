#!/usr/bin/env python3

# Copyright (C) 2024-2026 The adaptorsig developers
#
# This file is part of adaptorsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of adaptorsig including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"""Elliptic Curve Schnorr Signature Algorithm (ECSSA) verification.

This implementation is according to BIP340-Schnorr:

https://github.com/bitcoin/bips/blob/master/bip-0340.mediawiki

The BIP340-Schnorr scheme uses as public key the x-coordinate (field element)
of the curve point associated to the private key 0 < q < n.
Therefore, for sepcp256k1 the public key size is 32 bytes.
The full public key point is recovered with lift_x,
i.e. choosing the point with even y-coordinate.

BIP340 advocates its own SHA256 modification as hash function:
TaggedHash(tag, x) = SHA256(SHA256(tag)||SHA256(tag)||x)
The rationale is to make BIP340 signatures invalid for anything else
but Bitcoin and vice versa.

The challenge is e = TaggedHash('BIP0340/challenge', x_K||x_Q||msg) mod n,
with the message msg used verbatim, whatever its length.

BIP340-Schnorr adopts a robust [r][s] custom serialization
format, instead of the loosely specified ASN.1 DER standard.
For sepcp256k1 the resulting signature size is 64 bytes.

Verification recomputes K = sG - eQ and
checks that K is not INF, y_K is even, and x_K = r.
Signing is out of the scope of this package.
"""

from dataclasses import InitVar, dataclass
from typing import Type, TypeVar, Union

from adaptorsig.alias import INF, AffinePoint, Integer, Octets, Point
from adaptorsig.ecc import libsecp256k1
from adaptorsig.ecc.curve import Curve, secp256k1
from adaptorsig.ecc.curve_group import mult_aff
from adaptorsig.exceptions import AdaptorSigTypeError, VerificationError
from adaptorsig.hashes import tagged_hash
from adaptorsig.utils import bytes_from_octets

_Sig = TypeVar("_Sig", bound="Sig")


@dataclass(frozen=True)
class Sig:
    """BIP340-Schnorr signature.

    - r is an x-coordinate _field_element_, 0 <= r < ec.p
    - s is a scalar, 0 <= s < ec.n (yes, for BIP340-Schnorr it can be zero)

    (ec.p is the field prime, ec.n is the curve order)

    The same structure holds adaptor pre-signatures (r, s').
    """

    # 32 bytes x-coordinate field element
    r: int
    # 32 bytes scalar
    s: int
    ec: Curve = secp256k1
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        # r is a field element, values are not wrapped
        self.ec.fp.require_element(self.r, "field element r")
        # s is a scalar, fail if s is not in [0, n-1]
        self.ec.fn.require_element(self.s, "scalar s")

    def serialize(self, check_validity: bool = True) -> bytes:
        if check_validity:
            self.assert_valid()

        out = self.r.to_bytes(self.ec.p_size, byteorder="big", signed=False)
        out += self.s.to_bytes(self.ec.n_size, byteorder="big", signed=False)
        return out

    @classmethod
    def parse(
        cls: Type[_Sig], data: Octets, ec: Curve = secp256k1, check_validity: bool = True
    ) -> _Sig:
        "Return a Sig from its r||s serialization, whose size must be exact."
        data = bytes_from_octets(data, ec.p_size + ec.n_size)
        r = int.from_bytes(data[: ec.p_size], byteorder="big", signed=False)
        s = int.from_bytes(data[ec.p_size :], byteorder="big", signed=False)
        return cls(r, s, ec, check_validity)


def sig_from_octets(sig: Union[Sig, Octets], ec: Curve = secp256k1) -> Sig:
    "Return a verified-as-valid Sig from a Sig or its serialization."
    if isinstance(sig, Sig):
        sig.assert_valid()
        return sig
    return Sig.parse(sig, ec)


# hex-string or bytes representation of an int
# p-size bytes or hex-string
# tuple Point
BIP340PubKey = Union[Integer, Octets, Point]


def point_from_bip340pub_key(x_Q: BIP340PubKey, ec: Curve = secp256k1) -> Point:
    """Return a verified-as-valid BIP340 public key as Point tuple.

    It supports:

    - BIP340 Octets (bytes or hex-string, p-size Point x-coordinate)
    - BIP340 integer x-coordinate
    - native tuple, of which only the x-coordinate is used

    The returned point always has even y-coordinate.
    """
    # BIP 340 key as integer
    if isinstance(x_Q, int):
        return ec.lift_x(x_Q)

    # (tuple) Point
    if isinstance(x_Q, tuple):
        ec.require_on_curve(x_Q)
        return ec.lift_x(x_Q[0])

    # BIP 340 key as bytes or hex-string
    if isinstance(x_Q, (str, bytes)):
        Q = bytes_from_octets(x_Q, ec.p_size)
        return ec.lift_x(int.from_bytes(Q, "big", signed=False))

    raise AdaptorSigTypeError("not a BIP340 public key")


def challenge_int(msg: Octets, x_Q: int, x_K: int, ec: Curve = secp256k1) -> int:
    "Return the BIP340 challenge hash as an integer, not reduced mod n."
    msg = bytes_from_octets(msg)

    t = b"".join(
        [
            x_K.to_bytes(ec.p_size, byteorder="big", signed=False),
            x_Q.to_bytes(ec.p_size, byteorder="big", signed=False),
            msg,
        ]
    )
    t = tagged_hash(b"BIP0340/challenge", t)
    return int.from_bytes(t, byteorder="big", signed=False)


def challenge_(msg: Octets, x_Q: int, x_K: int, ec: Curve = secp256k1) -> int:
    "Return the BIP340 challenge e = int(hash(x_K||x_Q||msg)) mod n."
    # e=0 is not rejected: verification has no inverse of e
    return ec.fn.reduce(challenge_int(msg, x_Q, x_K, ec))


def _recompute_nonce_point(c: int, Q: AffinePoint, s: int, ec: Curve) -> AffinePoint:
    "Return K = sG - cQ."
    sG = mult_aff(s, ec.G, ec)
    cQ = mult_aff(c, Q, ec)
    return ec.add_aff(sG, ec.negate(cQ))


def _assert_as_valid_(c: int, Q: AffinePoint, r: int, s: int, ec: Curve) -> None:
    # Private function for test/dev purposes
    # It raises Errors, while verify should always return True or False

    # Let K = sG - eQ.
    K = _recompute_nonce_point(c, Q, s, ec)

    # Fail if infinite(K).
    if K is INF:
        raise VerificationError("sG - eQ is INF")

    # Fail if y_K is odd.
    if K[1] % 2:
        raise VerificationError("y_K is odd")

    # Fail if x_K ≠ r
    if K[0] != r:
        raise VerificationError("signature verification failed")


def assert_as_valid(
    msg: Octets, Q: BIP340PubKey, sig: Union[Sig, Octets], ec: Curve = secp256k1
) -> None:
    """Raise an Error if the BIP340 signature of msg is not valid.

    The error type tells the failure reason:
    MalformedInputError, OutOfRangeError, LiftError, or VerificationError.
    """
    sig = sig_from_octets(sig, ec)

    x_Q, y_Q = point_from_bip340pub_key(Q, sig.ec)

    if sig.ec is secp256k1 and libsecp256k1.is_available():
        pubkey_bytes = x_Q.to_bytes(32, "big")
        msg = bytes_from_octets(msg)
        if not libsecp256k1.ecssa_verify_(msg, pubkey_bytes, sig.serialize()):
            raise VerificationError("libsecp256k1.ecssa_verify_ failed")
        return

    # Let c = int(hf(bytes(r) || bytes(Q) || msg)) mod n.
    c = challenge_(msg, x_Q, sig.r, sig.ec)
    _assert_as_valid_(c, (x_Q, y_Q), sig.r, sig.s, sig.ec)


def verify(
    msg: Octets, Q: BIP340PubKey, sig: Union[Sig, Octets], ec: Curve = secp256k1
) -> bool:
    """Verify the BIP340 signature of the provided message."""
    # all kind of Exceptions are catched because
    # verify must always return a bool
    try:
        assert_as_valid(msg, Q, sig, ec)
    except Exception:  # pylint: disable=broad-except
        return False

    return True
