#!/usr/bin/env python3

# Copyright (C) The keyfamily developers
#
# This file is part of keyfamily. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of keyfamily including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Public record of a key family.

A KeyFamily only holds the root public generator:
it can be shared with watch-only parties, which can then
derive all the public keys of the family.

The JSON representation is {"pub_gen": "<hex>"}.
"""

from dataclasses import InitVar, dataclass, field
from typing import Iterator, Type, TypeVar

from btclib.ec import bytes_from_point, secp256k1
from dataclasses_json import DataClassJsonMixin, config

from keyfamily.alias import DigestF, Octets, Point, PrvKey, Seed
from keyfamily.derivation import (
    key_pair_from_generator,
    point_from_generator,
    pub_key_from_generator,
)
from keyfamily.exceptions import InvalidGenerator, KeyFamilyValueError
from keyfamily.generator import pub_gen_from_seed
from keyfamily.hashes import sha512_half
from keyfamily.key_pair import KeyPair
from keyfamily.utils import MAX_INDEX, bytes_from_octets

_KeyFamily = TypeVar("_KeyFamily", bound="KeyFamily")

PUB_GEN_SIZE = secp256k1.p_size + 1


def _pub_gen_from_hex(value: str) -> bytes:
    try:
        return bytes.fromhex(value)
    except (TypeError, ValueError) as e:
        raise InvalidGenerator(f"invalid public generator: {e}") from e


@dataclass
class KeyFamily(DataClassJsonMixin):
    pub_gen: bytes = field(
        default=b"",
        metadata=config(encoder=lambda v: v.hex(), decoder=_pub_gen_from_hex),
    )
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        self.pub_gen = bytes(bytes_from_octets(self.pub_gen))
        if len(self.pub_gen) != PUB_GEN_SIZE:
            err_msg = "invalid public generator length: "
            err_msg += f"{len(self.pub_gen)} bytes instead of {PUB_GEN_SIZE}"
            raise KeyFamilyValueError(err_msg)
        point_from_generator(self.pub_gen)

    @classmethod
    def from_seed(
        cls: Type[_KeyFamily], seed: Seed, hf: DigestF = sha512_half
    ) -> _KeyFamily:
        "Return the KeyFamily generated by the seed."
        return cls(pub_gen_from_seed(seed, hf=hf))

    @classmethod
    def from_key_pair(cls: Type[_KeyFamily], root: KeyPair) -> _KeyFamily:
        "Return the KeyFamily whose root public generator is the root public key."
        return cls(bytes_from_point(root.pub_key))

    def pub_key(self, index: int, hf: DigestF = sha512_half) -> Point:
        return pub_key_from_generator(self.pub_gen, index, hf=hf)

    def pub_key_bytes(self, index: int, hf: DigestF = sha512_half) -> bytes:
        return bytes_from_point(self.pub_key(index, hf))

    def pub_keys(
        self, start: int = 0, count: int = 1, hf: DigestF = sha512_half
    ) -> Iterator[Point]:
        """Return an iterator over count consecutive public keys.

        The range is checked here, before any key is derived.
        """
        if count < 0:
            raise KeyFamilyValueError(f"negative count: {count}")
        if start + count - 1 > MAX_INDEX:
            raise KeyFamilyValueError(f"index overflow: {start} + {count}")
        return (self.pub_key(index, hf) for index in range(start, start + count))

    def key_pair(
        self, prv_key: PrvKey, index: int, hf: DigestF = sha512_half
    ) -> KeyPair:
        "Return the index-th key pair, given the root private key."
        return key_pair_from_generator(self.pub_gen, prv_key, index, hf=hf)

    def serialize(self, check_validity: bool = True) -> bytes:
        if check_validity:
            self.assert_valid()
        return self.pub_gen

    @classmethod
    def parse(
        cls: Type[_KeyFamily], data: Octets, check_validity: bool = True
    ) -> _KeyFamily:
        "Return a KeyFamily by parsing the 33 bytes root public generator."
        return cls(bytes(bytes_from_octets(data)), check_validity)
