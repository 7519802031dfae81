#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Typed value types and records for ICRP-07 data

Value types (:class:`Nuclide`, :class:`HalfLife`) are immutable keys and
results; records are frozen dataclasses produced by the reader layer.
"""

from __future__ import annotations

from pyicrp.models.half_life import HalfLife, TimeUnit
from pyicrp.models.nuclide import DecayMode, Nuclide, Progeny
from pyicrp.models.records import (
    AckRecord,
    BetRecord,
    NsfRecord,
    NuclideAttribute,
    RadiationType,
    RadRecord,
    SpectrumRecord,
    records_to_arrays,
)

__all__ = [
    "HalfLife",
    "TimeUnit",
    "DecayMode",
    "Nuclide",
    "Progeny",
    "NuclideAttribute",
    "RadiationType",
    "RadRecord",
    "BetRecord",
    "AckRecord",
    "NsfRecord",
    "SpectrumRecord",
    "records_to_arrays",
]
