#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Dataset façade and its load-once table cache
"""

from __future__ import annotations

from pyicrp.dataset.cache import OnceCell
from pyicrp.dataset.icrp107 import ICRP107Dataset

__all__ = ["ICRP107Dataset", "OnceCell"]
