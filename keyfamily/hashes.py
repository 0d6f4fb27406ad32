#!/usr/bin/env python3

# Copyright (C) The keyfamily developers
#
# This file is part of keyfamily. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of keyfamily including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Hash based helper functions."""

import hashlib
from typing import Union

from keyfamily.alias import Buffer
from keyfamily.secret import secret_octets

HALF_SIZE = 32


def sha512_half(data: Union[Buffer, str]) -> bytearray:
    """Return the first half of the SHA512(*) of the input buffer.

    The 256 bits digest is returned as a bytearray,
    so that the caller can wipe it after use.
    hex-strings are accepted too.
    """
    with secret_octets(data) as buf:
        # best-effort: hashlib only returns immutable bytes,
        # so the full 64 bytes digest cannot be wiped
        return bytearray(hashlib.sha512(buf).digest()[:HALF_SIZE])
