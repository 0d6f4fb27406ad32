#!/usr/bin/env python3

# Copyright (C) The keyfamily developers
#
# This file is part of keyfamily. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of keyfamily including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the keyfamily package."

name = "keyfamily"
__version__ = "2024.3.1"
__author__ = "The keyfamily developers"
__author_email__ = "devs@keyfamily.org"
__copyright__ = "Copyright (C) 2024 The keyfamily developers"
__license__ = "MIT License"
