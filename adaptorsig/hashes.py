#!/usr/bin/env python3

# Copyright (C) 2024-2026 The adaptorsig developers
#
# This file is part of adaptorsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of adaptorsig including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"""Hash based helper functions."""

import hashlib

from adaptorsig.alias import Octets
from adaptorsig.utils import bytes_from_octets


def sha256(octets: Octets) -> bytes:
    """Return the SHA256(*) of the input octet sequence."""
    octets = bytes_from_octets(octets)
    return hashlib.sha256(octets).digest()


def tagged_hash(tag: bytes, m: bytes) -> bytes:
    """Return SHA256(SHA256(tag)||SHA256(tag)||m).

    The domain separation prevents hashes computed for one
    purpose from being reused for another one.
    """
    tag_hash = hashlib.sha256(tag).digest()

    h = hashlib.sha256()
    h.update(tag_hash + tag_hash)
    # it could be sped up by storing the above midstate
    h.update(m)
    return h.digest()
