#!/usr/bin/env python3

# Copyright (C) The keyfamily developers
#
# This file is part of keyfamily. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of keyfamily including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Assorted conversion utilities."""

from collections.abc import Iterable as IterableCollection
from typing import Iterable, Optional, Union

from btclib.ec import Curve, secp256k1

from keyfamily.alias import Octets, PrvKey
from keyfamily.exceptions import KeyFamilyTypeError, KeyFamilyValueError
from keyfamily.secret import secret_octets

MAX_INDEX = 0xFFFFFFFF

NoneOneOrMoreInt = Optional[Union[int, Iterable[int]]]


def bytes_from_octets(
    octets: Octets, out_size: NoneOneOrMoreInt = None
) -> Union[bytes, bytearray]:
    """Return bytes from a hex-string, stripping leading/trailing spaces.

    bytes and bytearray go untouched (no copy is made).
    Optionally, it also ensures required output size.
    """

    if isinstance(octets, str):  # hex string
        octets = bytes.fromhex(octets)
    elif not isinstance(octets, (bytes, bytearray)):
        raise KeyFamilyTypeError(f"not octets: {type(octets).__name__}")

    if (
        out_size is None
        or isinstance(out_size, int)
        and len(octets) == out_size
        or isinstance(out_size, IterableCollection)
        and len(octets) in out_size
    ):
        return octets

    err_msg = f"invalid size: {len(octets)} bytes instead of {out_size}"
    raise KeyFamilyValueError(err_msg)


def bytes_from_index(index: int) -> bytes:
    "Return the 4 bytes big-endian encoding of a 32-bit index."
    if not isinstance(index, int) or isinstance(index, bool):
        raise KeyFamilyTypeError(f"index is not an int: {index!r}")
    if not 0 <= index <= MAX_INDEX:
        raise KeyFamilyValueError(f"invalid index: {index}")
    return index.to_bytes(4, byteorder="big", signed=False)


def int_from_prv_key(prv_key: PrvKey, ec: Curve = secp256k1) -> int:
    """Return a verified-as-valid private key integer.

    It supports native int and n_size Octets (bytes or hex-string);
    a hex-string is decoded into a buffer wiped on exit.
    """

    if isinstance(prv_key, int) and not isinstance(prv_key, bool):
        q = prv_key
    else:
        try:
            with secret_octets(prv_key) as raw:
                raw = bytes_from_octets(raw, ec.n_size)
                q = int.from_bytes(raw, byteorder="big", signed=False)
        except (ValueError, TypeError) as e:
            raise KeyFamilyValueError("not a private key") from e

    # the value is secret: it is not included in the error message
    if not 0 < q < ec.n:
        raise KeyFamilyValueError("private key not in 1..n-1")

    return q
