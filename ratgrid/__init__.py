# SPDX-FileCopyrightText: 2025 ratgrid contributors
# SPDX-License-Identifier: Apache-2.0

from .rational import *
from .board import *
