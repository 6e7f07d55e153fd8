#!/usr/bin/env python3

# Copyright (C) 2024-2026 The adaptorsig developers
#
# This file is part of adaptorsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of adaptorsig including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"""Helper functions to use the libsecp256k1 python bindings.

The bindings are an optional dependency
(pip install adaptorsig[secp256k1]);
when they are not installed the pure python implementation is used.
"""

import contextlib

from adaptorsig.alias import Octets
from adaptorsig.utils import bytes_from_octets

LIBSECP256K1_AVAILABLE = False
with contextlib.suppress(ImportError):
    from btclib_libsecp256k1 import ffi, lib

    LIBSECP256K1_AVAILABLE = True
    # Keeping a single one of these is most efficient.
    ctx = lib.secp256k1_context_create(769)
    # ctx = lib.secp256k1_context_create(
    #    lib.SECP256K1_CONTEXT_SIGN | lib.SECP256K1_CONTEXT_VERIFY
    # )


def is_available() -> bool:
    return LIBSECP256K1_AVAILABLE


def ecssa_verify_(msg: Octets, pub_key: Octets, sig: Octets) -> bool:
    """Verify a BIP340 Schnorr signature of a message of any length.

    The x-only public key is 32 bytes, the signature 64 bytes.
    An invalid public key makes the verification fail.
    """
    msg = bytes_from_octets(msg)
    pub_key = b"\x02" + bytes_from_octets(pub_key, 32)
    sig = bytes_from_octets(sig, 64)

    pubkey_ptr = ffi.new("secp256k1_pubkey *")
    if not lib.secp256k1_ec_pubkey_parse(ctx, pubkey_ptr, pub_key, len(pub_key)):
        return False

    xonly_pubkey_ptr = ffi.new("secp256k1_xonly_pubkey *")
    lib.secp256k1_xonly_pubkey_from_pubkey(ctx, xonly_pubkey_ptr, ffi.NULL, pubkey_ptr)

    return bool(lib.secp256k1_schnorrsig_verify(ctx, sig, msg, len(msg), xonly_pubkey_ptr))
