#!/usr/bin/env python3

# Copyright (C) The keyfamily developers
#
# This file is part of keyfamily. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of keyfamily including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Wipeable buffers for secret material.

Secret bytes (seeds, hash preimages, digests) are kept in bytearray
buffers owned by a context manager: when the owning scope is left,
for whatever reason, the buffer is overwritten with zeros in place.

Python int and bytes are immutable and cannot be wiped:
scalars are unavoidably int, but they are never stored
beyond the scope that computes them.
"""

import contextlib
from typing import Iterator, Union


def wipe(buf: bytearray) -> None:
    "Overwrite the buffer with zeros, without reallocating it."
    buf[:] = bytes(len(buf))


def is_wiped(buf: Union[bytes, bytearray, memoryview]) -> bool:
    return not any(buf)


@contextlib.contextmanager
def scratch_buffer(init: Union[int, bytes, bytearray, memoryview]) -> Iterator[bytearray]:
    """Yield a new bytearray, wiped on exit.

    The buffer is either zero-filled of the given size
    or a copy of the given data: the original data is left untouched.
    """
    buf = bytearray(init)
    try:
        yield buf
    finally:
        wipe(buf)


@contextlib.contextmanager
def wiping(buf: bytearray) -> Iterator[bytearray]:
    "Take ownership of an existing bytearray and wipe it on exit."
    try:
        yield buf
    finally:
        wipe(buf)


@contextlib.contextmanager
def secret_octets(
    octets: Union[str, bytes, bytearray]
) -> Iterator[Union[bytes, bytearray]]:
    """Yield the octets, decoding a hex-string into an owned bytearray.

    The decoded bytearray is wiped on exit;
    bytes and bytearray of the caller are yielded untouched.
    """
    if isinstance(octets, str):
        with wiping(bytearray.fromhex(octets)) as buf:
            yield buf
    else:
        yield octets
