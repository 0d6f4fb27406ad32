#!/usr/bin/env python3

# Copyright (C) The keyfamily developers
#
# This file is part of keyfamily. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of keyfamily including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

The base classes are only meant to discriminate between Exceptions
raised by keyfamily from those raised by other codebase:
users can just catch the regular ValueError, TypeError,
and RuntimeError from which they are derived.

InvalidGenerator and CryptoUnavailable are the two failures
a key derivation can end with.
"""


class KeyFamilyValueError(ValueError):
    pass


class KeyFamilyTypeError(TypeError):
    pass


class KeyFamilyRuntimeError(RuntimeError):
    pass


class InvalidGenerator(KeyFamilyValueError):
    """Bytes that are not a compressed point of the curve.

    Raised when a root public generator cannot be decoded:
    the input has to be fixed by the caller.
    """


class CryptoUnavailable(KeyFamilyRuntimeError):
    """The elliptic curve machinery cannot be used.

    Not recoverable within the same call.
    """
