#!/usr/bin/env python3

# Copyright (C) The keyfamily developers
#
# This file is part of keyfamily. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of keyfamily including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Public and private derivation of the keys of a family.

Public derivation (from the root public generator only):

    pub_key(i) = offset(pub_gen, i) * G + root_pub_key

Private derivation (root private key required):

    prv_key(i) = (root_prv_key + offset(pub_gen, i)) % n

Both hash the public generator, so that
mult(prv_key(i)) == pub_key(i) for any index i.
"""

import logging

from btclib.ec import Curve, bytes_from_point, mult, point_from_octets, secp256k1

from keyfamily.alias import DigestF, Point, PrvKey, PubGen, Seed
from keyfamily.exceptions import InvalidGenerator, KeyFamilyRuntimeError
from keyfamily.generator import curve_order, offset_for, root_key_pair_from_seed
from keyfamily.hashes import sha512_half
from keyfamily.key_pair import KeyPair
from keyfamily.utils import bytes_from_octets, int_from_prv_key

logger = logging.getLogger(__name__)


def point_from_generator(pub_gen: PubGen, ec: Curve = secp256k1) -> Point:
    """Return the root public key point from its SEC compressed octets.

    InvalidGenerator is raised if the octets are not
    a compressed point on the curve.
    """

    curve_order(ec)
    try:
        pub_gen = bytes_from_octets(pub_gen, ec.p_size + 1)
    except ValueError as e:
        raise InvalidGenerator(f"invalid public generator: {e}") from e

    if pub_gen[0] not in (0x02, 0x03):
        err_msg = "invalid public generator prefix not in (0x02, 0x03): "
        err_msg += f"0x{pub_gen[:1].hex()}"
        raise InvalidGenerator(err_msg)

    try:
        return point_from_octets(bytes(pub_gen), ec)
    except ValueError as e:
        raise InvalidGenerator(f"invalid public generator: {e}") from e


def pub_key_from_generator(
    pub_gen: PubGen, index: int, ec: Curve = secp256k1, hf: DigestF = sha512_half
) -> Point:
    "Return the index-th public key of the family, without any private key."

    Q = point_from_generator(pub_gen, ec)
    Q_bytes = bytes_from_point(Q, ec)
    logger.debug("public derivation of key %d from %s", index, Q_bytes.hex())

    offset = offset_for(Q_bytes, index, ec, hf)
    R = ec.add(mult(offset, ec.G, ec), Q)
    del offset
    if R[1] == 0:  # infinity point in affine coordinates
        raise KeyFamilyRuntimeError("derived public key is the infinity point")

    return R


def key_pair_from_generator(
    pub_gen: PubGen,
    prv_key: PrvKey,
    index: int,
    ec: Curve = secp256k1,
    hf: DigestF = sha512_half,
) -> KeyPair:
    """Return the index-th key pair of the family.

    The offset is computed from the root public generator,
    not from the root private key, as in public derivation.
    The root private key is not checked to match the generator:
    a mismatched pair yields keys of a different family.
    """

    Q = point_from_generator(pub_gen, ec)
    q_root = int_from_prv_key(prv_key, ec)
    Q_bytes = bytes_from_point(Q, ec)
    logger.debug("private derivation of key %d from %s", index, Q_bytes.hex())

    offset = offset_for(Q_bytes, index, ec, hf)
    q = (q_root + offset) % ec.n
    del offset, q_root
    if q == 0:
        raise KeyFamilyRuntimeError("derived private key is zero")

    return KeyPair.from_prv_key(q, ec)


def key_pair_from_seed(
    seed: Seed, index: int, ec: Curve = secp256k1, hf: DigestF = sha512_half
) -> KeyPair:
    "Return the index-th key pair of the family generated by the seed."

    root = root_key_pair_from_seed(seed, ec, hf)
    pub_gen = bytes_from_point(root.pub_key, ec)
    return key_pair_from_generator(pub_gen, root.prv_key, index, ec, hf)
