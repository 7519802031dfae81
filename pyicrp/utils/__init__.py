#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared utilities for parsing and validation

This sub-package centralises fixed tables, token conversion and key range
checks so that no logic is duplicated across the reader modules.
"""

from __future__ import annotations
