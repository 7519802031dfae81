#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
ICRP-07 table readers

This sub-package provides one reader class per table file:

* :class:`~pyicrp.readers.ndx.IndexReader` — nuclide index (NDX)
* :class:`~pyicrp.readers.spectrum.RADReader` — discrete radiations
* :class:`~pyicrp.readers.spectrum.BETReader` — beta spectra
* :class:`~pyicrp.readers.spectrum.ACKReader` — auger / CK electrons
* :class:`~pyicrp.readers.spectrum.NSFReader` — fission-neutron spectra

All readers share the :class:`~pyicrp.readers.base.BaseReader` interface.
"""

from __future__ import annotations

from pyicrp.readers.ndx import IndexReader
from pyicrp.readers.spectrum import ACKReader, BETReader, NSFReader, RADReader

__all__ = ["IndexReader", "RADReader", "BETReader", "ACKReader", "NSFReader"]
