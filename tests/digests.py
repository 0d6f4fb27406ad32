#!/usr/bin/env python3

# Copyright (C) The keyfamily developers
#
# This file is part of keyfamily. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of keyfamily including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Instrumented digest functions for the keyfamily tests."

from typing import Iterable, List, Optional

from keyfamily.alias import Buffer
from keyfamily.hashes import sha512_half


class RecordingDigest:
    """Digest function keeping track of its inputs and outputs.

    It keeps references to the buffers it is called with
    and to the digests it returns, so that the tests can check
    they have been wiped, and copies of the inputs at call time.

    If scripted integers are provided, they are returned (32 bytes
    big-endian) in place of the actual digests, one per call;
    the real sha512_half is used once the script is exhausted.
    """

    def __init__(self, scripted: Optional[Iterable[int]] = None) -> None:
        self.scripted = list(scripted or [])
        self.buffers: List[Buffer] = []
        self.inputs: List[bytes] = []
        self.digests: List[bytearray] = []

    def __call__(self, buf: Buffer) -> bytearray:
        self.buffers.append(buf)
        self.inputs.append(bytes(buf))
        if len(self.digests) < len(self.scripted):
            value = self.scripted[len(self.digests)]
            digest = bytearray(value.to_bytes(32, byteorder="big", signed=False))
        else:
            digest = sha512_half(buf)
        self.digests.append(digest)
        return digest

    @property
    def counters(self) -> List[int]:
        "The big-endian counters at the end of each input buffer."
        return [int.from_bytes(data[-4:], byteorder="big") for data in self.inputs]


def constant_digest(value: int):
    "Return a digest function always returning the value, 32 bytes big-endian."

    def hf(_: Buffer) -> bytearray:
        return bytearray(value.to_bytes(32, byteorder="big", signed=False))

    return hf
