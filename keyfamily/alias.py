#!/usr/bin/env python3

# Copyright (C) The keyfamily developers
#
# This file is part of keyfamily. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of keyfamily including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Callable, Tuple, Union

# Octets are a sequence of eight-bit bytes or a hex-string (not text string)
#
# hex-strings are strings that can be converted to bytes using bytes.fromhex,
# e.g.:
# "DEDCE9CE67B451D852FD4E846FCDE31C"
# "DEDCE9CE 67B451D8 52FD4E84 6FCDE31C"
#
# bytearray is accepted too, as secret material
# is better kept in a buffer that can be wiped
Octets = Union[bytes, bytearray, str]

# buffers that can be fed to a hash function without any copy
Buffer = Union[bytes, bytearray, memoryview]

# a 16 bytes family seed, e.g.
# "DEDCE9CE67B451D852FD4E846FCDE31C"
Seed = Octets

# a 33 bytes SEC compressed root public generator:
# 0x02 or 0x03 prefix, then the 32 bytes x-coordinate
PubGen = Octets

# private key scalar as native int or 32 bytes Octets
PrvKey = Union[int, bytes, bytearray, str]

# Digest function: it returns a 32 bytes mutable buffer,
# so that the caller can wipe it as soon as it has been consumed
DigestF = Callable[[Buffer], bytearray]

# Elliptic curve point in affine coordinates,
# the same representation used by btclib
Point = Tuple[int, int]
