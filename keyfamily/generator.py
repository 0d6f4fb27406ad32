#!/usr/bin/env python3

# Copyright (C) The keyfamily developers
#
# This file is part of keyfamily. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of keyfamily including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Root key and offset generation for deterministic key families.

A key family is a sequence of key pairs derived from a single
16 bytes seed. The seed is hashed, together with a 32-bit counter,
until a valid private key is found: that is the root private key,
whose public key is the root public generator.

The n-th key of the family has private key

    (root_prv_key + offset(root_pub_gen, n)) % n

and public key

    offset(root_pub_gen, n) * G + root_pub_key

where the offset is computed hashing the root public generator,
the index n, and a 32-bit sub-counter, until a valid scalar is found.
The offset only depends on public data: the public keys of the
family can be derived without access to the root private key.

Candidate buffers:

- root:   [ 0:16] seed, [16:20] counter (big-endian)
- offset: [ 0:33] compressed root public generator,
  [33:37] index (big-endian), [37:41] sub-counter (big-endian)

Each candidate is the big-endian integer from the first half of
the SHA512 digest of its buffer: it is accepted if in 1..n-1.
"""

import logging

from btclib.ec import Curve, bytes_from_point, secp256k1

from keyfamily.alias import Buffer, DigestF, PubGen, Seed
from keyfamily.exceptions import CryptoUnavailable
from keyfamily.hashes import sha512_half
from keyfamily.key_pair import KeyPair
from keyfamily.secret import scratch_buffer, secret_octets, wiping
from keyfamily.utils import bytes_from_index, bytes_from_octets

logger = logging.getLogger(__name__)

SEED_SIZE = 16
COUNTER_SIZE = 4
# the counter is 32-bit: the whole counter space is the attempt cap
MAX_ATTEMPTS = 0x100000000


def curve_order(ec: Curve) -> int:
    "Return the order of the curve generator, or raise CryptoUnavailable."
    n = getattr(ec, "n", None)
    if getattr(ec, "G", None) is None or not isinstance(n, int) or n < 2:
        raise CryptoUnavailable(f"not a prime order curve: {ec!r}")
    return n


def _scalar_from_prefix(prefix: Buffer, n: int, hf: DigestF, label: str) -> int:
    """Return the first candidate scalar in 1..n-1.

    The candidate for counter i is the big-endian integer of
    hf(prefix || i), with i as 4 bytes big-endian.
    """

    size = len(prefix) + COUNTER_SIZE
    for counter in range(MAX_ATTEMPTS):
        with scratch_buffer(size) as buf:
            buf[:-COUNTER_SIZE] = prefix
            buf[-COUNTER_SIZE:] = counter.to_bytes(
                COUNTER_SIZE, byteorder="big", signed=False
            )
            digest = hf(buf)
        if not isinstance(digest, bytearray):
            digest = bytearray(digest)
        with wiping(digest):
            candidate = int.from_bytes(digest, byteorder="big", signed=False)
        if 0 < candidate < n:
            return candidate
        logger.debug("%s candidate rejected at counter %d", label, counter)

    raise CryptoUnavailable(f"no valid {label} scalar in {MAX_ATTEMPTS} attempts")


def root_key_pair_from_seed(
    seed: Seed, ec: Curve = secp256k1, hf: DigestF = sha512_half
) -> KeyPair:
    """Return the root key pair of the family generated by the seed.

    The root public key, SEC compressed, is the family
    root public generator.
    A hex-string seed is decoded into a buffer wiped on exit.
    """

    n = curve_order(ec)
    with secret_octets(seed) as raw:
        seed = bytes_from_octets(raw, SEED_SIZE)
        with scratch_buffer(seed) as prefix:
            q = _scalar_from_prefix(prefix, n, hf, "root")
    return KeyPair.from_prv_key(q, ec)


def pub_gen_from_seed(
    seed: Seed, ec: Curve = secp256k1, hf: DigestF = sha512_half
) -> bytes:
    "Return the SEC compressed root public generator from the seed."
    root = root_key_pair_from_seed(seed, ec, hf)
    return bytes_from_point(root.pub_key, ec)


def offset_for(
    pub_gen: PubGen, index: int, ec: Curve = secp256k1, hf: DigestF = sha512_half
) -> int:
    """Return the offset scalar for the index-th key of the family.

    The root public generator must be SEC compressed,
    but here it is not checked to be a valid point.
    """

    n = curve_order(ec)
    pub_gen = bytes_from_octets(pub_gen, ec.p_size + 1)
    index_bytes = bytes_from_index(index)
    with scratch_buffer(len(pub_gen) + len(index_bytes)) as prefix:
        prefix[: len(pub_gen)] = pub_gen
        prefix[len(pub_gen) :] = index_bytes
        return _scalar_from_prefix(prefix, n, hf, "offset")
