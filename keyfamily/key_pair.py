#!/usr/bin/env python3

# Copyright (C) The keyfamily developers
#
# This file is part of keyfamily. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of keyfamily including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve key pair.

A KeyPair associates a private key scalar with its public key point.
It is deliberately not serializable: there is no to_dict/serialize,
and the private key is excluded from repr.
"""

from dataclasses import InitVar, dataclass, field

from btclib.ec import Curve, bytes_from_point, mult, secp256k1

from keyfamily.alias import Point
from keyfamily.exceptions import KeyFamilyValueError


@dataclass(frozen=True)
class KeyPair:
    prv_key: int = field(repr=False)
    pub_key: Point
    ec: Curve = field(default_factory=lambda: secp256k1, repr=False, compare=False)
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    @classmethod
    def from_prv_key(cls, prv_key: int, ec: Curve = secp256k1) -> "KeyPair":
        "Return the KeyPair with the public key computed as prv_key * G."
        if not 0 < prv_key < ec.n:
            raise KeyFamilyValueError("private key not in 1..n-1")
        # valid by construction
        return cls(prv_key, mult(prv_key, ec.G, ec), ec, False)

    @property
    def pub_key_bytes(self) -> bytes:
        "Return the public key as SEC compressed octets."
        return bytes_from_point(self.pub_key, self.ec)

    def assert_valid(self) -> None:
        if not 0 < self.prv_key < self.ec.n:
            raise KeyFamilyValueError("private key not in 1..n-1")
        if mult(self.prv_key, self.ec.G, self.ec) != self.pub_key:
            raise KeyFamilyValueError("public key does not match private key")
