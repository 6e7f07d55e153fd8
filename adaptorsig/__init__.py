#!/usr/bin/env python3

# Copyright (C) 2024-2026 The adaptorsig developers
#
# This file is part of adaptorsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of adaptorsig including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"__init__ module for the adaptorsig package."

name = "adaptorsig"
__version__ = "2026.10.1"
__author__ = "The adaptorsig developers"
__author_email__ = "devs@adaptorsig.org"
__copyright__ = "Copyright (C) 2024-2026 The adaptorsig developers"
__license__ = "MIT License"
