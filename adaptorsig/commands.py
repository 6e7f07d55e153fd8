#!/usr/bin/env python3

# Copyright (C) 2024-2026 The adaptorsig developers
#
# This file is part of adaptorsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of adaptorsig including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"""Command dispatcher over packed call data.

The first byte of the call data is the command opcode,
the remaining bytes are the packed command arguments
(sizes are for secp256k1, where field elements and scalars are 32 bytes):

| opcode | command        | arguments                                 | return data |
|--------|----------------|-------------------------------------------|-------------|
| 0      | VERIFY         | msg_len(1) msg x_Q(32) sig(64)            |             |
| 1      | ADAPTOR_VERIFY | msg_len(1) msg x_Q(32) pre_sig(64) T(64)  |             |
| 2      | EXTRACT        | sig(64) pre_sig(64)                       | t(32)       |
| 3      | LIFT_X         | x(32)                                     | x(32) y(32) |
| 4      | POINT_ADD      | P1(64) P2(64)                             | P1+P2 (64)  |
| 5      | POINT_MUL      | P(64) k(32)                               | kP (64)     |

Points are raw x||y, with INF as all-zero bytes.
The result is a status (SUCCESS or FAILURE) and the return data:
verification commands succeed only if the signature is valid,
any malformed call data makes the command fail.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Tuple

from adaptorsig.alias import Octets
from adaptorsig.ecc import adaptor, ssa
from adaptorsig.ecc.curve import Curve, mult, secp256k1
from adaptorsig.ecc.sec_point import bytes_from_point, bytes_from_scalar, point_from_octets
from adaptorsig.exceptions import (
    AdaptorSigRuntimeError,
    AdaptorSigTypeError,
    AdaptorSigValueError,
    MalformedInputError,
)
from adaptorsig.utils import bytes_from_octets

logger = logging.getLogger(__name__)

VERIFY = 0
ADAPTOR_VERIFY = 1
EXTRACT = 2
LIFT_X = 3
POINT_ADD = 4
POINT_MUL = 5

SUCCESS = 0
FAILURE = 1


@dataclass(frozen=True)
class CommandResult:
    status: int
    data: bytes = b""

    @property
    def success(self) -> bool:
        return self.status == SUCCESS


def _from_bool(valid: bool) -> CommandResult:
    return CommandResult(SUCCESS if valid else FAILURE)


def _split(args: bytes, *sizes: int) -> Tuple[bytes, ...]:
    "Split args in chunks of the given sizes, requiring an exact total size."
    expected = sum(sizes)
    if len(args) != expected:
        raise MalformedInputError(f"invalid size: {len(args)} bytes instead of {expected}")
    chunks = []
    start = 0
    for size in sizes:
        chunks.append(args[start : start + size])
        start += size
    return tuple(chunks)


def _split_message(args: bytes, *sizes: int) -> Tuple[bytes, ...]:
    "Split a length-prefixed message followed by fixed size arguments."
    if not args:
        raise MalformedInputError("missing message length")
    return _split(args[1:], args[0], *sizes)


def handle_verify(args: bytes, ec: Curve = secp256k1) -> CommandResult:
    sig_size = ec.p_size + ec.n_size
    msg, x_Q, sig = _split_message(args, ec.p_size, sig_size)
    return _from_bool(ssa.verify(msg, x_Q, sig, ec))


def handle_adaptor_verify(args: bytes, ec: Curve = secp256k1) -> CommandResult:
    sig_size = ec.p_size + ec.n_size
    msg, x_Q, pre_sig, T = _split_message(args, ec.p_size, sig_size, 2 * ec.p_size)
    return _from_bool(adaptor.verify(msg, x_Q, pre_sig, T, ec))


def handle_extract(args: bytes, ec: Curve = secp256k1) -> CommandResult:
    sig_size = ec.p_size + ec.n_size
    sig, pre_sig = _split(args, sig_size, sig_size)
    t = adaptor.extract(sig, pre_sig, ec)
    return CommandResult(SUCCESS, bytes_from_scalar(t, ec))


def handle_lift_x(args: bytes, ec: Curve = secp256k1) -> CommandResult:
    (x,) = _split(args, ec.p_size)
    Q = ec.lift_x(int.from_bytes(x, byteorder="big", signed=False))
    return CommandResult(SUCCESS, bytes_from_point(Q, ec))


def handle_point_add(args: bytes, ec: Curve = secp256k1) -> CommandResult:
    data1, data2 = _split(args, 2 * ec.p_size, 2 * ec.p_size)
    Q = ec.add(point_from_octets(data1, ec), point_from_octets(data2, ec))
    return CommandResult(SUCCESS, bytes_from_point(Q, ec))


def handle_point_mul(args: bytes, ec: Curve = secp256k1) -> CommandResult:
    data, k = _split(args, 2 * ec.p_size, ec.n_size)
    m = int.from_bytes(k, byteorder="big", signed=False)
    Q = mult(m, point_from_octets(data, ec), ec)
    return CommandResult(SUCCESS, bytes_from_point(Q, ec))


Handler = Callable[[bytes, Curve], CommandResult]

HANDLERS: Dict[int, Handler] = {
    VERIFY: handle_verify,
    ADAPTOR_VERIFY: handle_adaptor_verify,
    EXTRACT: handle_extract,
    LIFT_X: handle_lift_x,
    POINT_ADD: handle_point_add,
    POINT_MUL: handle_point_mul,
}


def dispatch(call_data: Octets, ec: Curve = secp256k1) -> CommandResult:
    """Decode the opcode, run the command, and return its result.

    It never raises on malformed call data: it fails instead.
    """
    try:
        call_data = bytes_from_octets(call_data)
    except ValueError as e:
        # not a valid hex-string
        logger.debug("invalid call data: %s", e)
        return CommandResult(FAILURE)
    if not call_data:
        logger.debug("empty call data")
        return CommandResult(FAILURE)

    opcode, args = call_data[0], call_data[1:]
    handler = HANDLERS.get(opcode)
    if handler is None:
        logger.debug("unknown opcode: %s", opcode)
        return CommandResult(FAILURE)

    try:
        return handler(args, ec)
    except (AdaptorSigValueError, AdaptorSigTypeError, AdaptorSigRuntimeError) as e:
        logger.debug("%s failed: %s", handler.__name__, e)
        return CommandResult(FAILURE)
