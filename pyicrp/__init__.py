#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
PyICRP - Python library for reading ICRP Publication 107 decay data

Load the ICRP-07 nuclear decay tables (nuclide index, discrete radiations,
beta spectra, auger/CK electron spectra and spontaneous-fission neutron
spectra) into typed, immutable, lazily loaded lookup tables.

Usage
-----
1. **Open** a dataset directory (nothing is read yet):
   ``data = ICRP107Dataset.open("ICRP-07")``

2. **Query** decay properties through the :class:`DecayData` interface:
   ``data.half_life("Co-60")``, ``data.progeny("Mo-99")``,
   ``data.decay_constant("Tc-99m")``

3. **Read spectra** per nuclide:
   ``data.discrete()[Nuclide.from_str("Co-60")]``

4. **Export** to HDF5 (optional):
   ``convert_dataset_to_hdf5("ICRP-07", "icrp107.h5")``

Modules
-------
models
    Nuclide and half-life value types, typed table records.
readers
    ICRP-07 table readers, one per file.
dataset
    Dataset façade with a load-once cache per table.
decay
    Decay-data capability interface and an in-memory implementation.
converters
    HDF5 export.
utils
    Fixed tables, token conversion and key validation.

Examples
--------
>>> from pyicrp import ICRP107Dataset
>>> data = ICRP107Dataset.open("ICRP-07")
>>> str(data.half_life("Co-60"))
'5.2713 y'
"""

from __future__ import annotations

__version__ = "0.1.0"
__author__ = "Melek Derman"

from pyicrp.converters.hdf5 import convert_dataset_to_hdf5
from pyicrp.dataset.cache import OnceCell
from pyicrp.dataset.icrp107 import ICRP107Dataset
from pyicrp.decay import DecayData, InMemoryDecayData, IndexedDecayData
from pyicrp.models.half_life import HalfLife, TimeUnit
from pyicrp.models.nuclide import DecayMode, Nuclide, Progeny
from pyicrp.models.records import (
    AckRecord,
    BetRecord,
    NsfRecord,
    NuclideAttribute,
    RadiationType,
    RadRecord,
)
from pyicrp.readers.ndx import IndexReader
from pyicrp.readers.spectrum import ACKReader, BETReader, NSFReader, RADReader
from pyicrp.exceptions import (
    PyICRPError,
    InvalidNuclide,
    InvalidAtomicNumber,
    InvalidSymbol,
    InvalidState,
    ParseError,
    InvalidHalfLife,
    InvalidDecayMode,
    InvalidRadiationType,
    InvalidFloat,
    InvalidInteger,
    InvalidEnergy,
    MalformedRecord,
    InvalidFilePath,
    DatasetIOError,
    ConversionError,
)


__all__ = [
    # Version
    "__version__",
    # Dataset
    "ICRP107Dataset",
    "OnceCell",
    "DecayData",
    "IndexedDecayData",
    "InMemoryDecayData",
    # Models
    "Nuclide",
    "DecayMode",
    "Progeny",
    "HalfLife",
    "TimeUnit",
    "NuclideAttribute",
    "RadiationType",
    "RadRecord",
    "BetRecord",
    "AckRecord",
    "NsfRecord",
    # Readers
    "IndexReader",
    "RADReader",
    "BETReader",
    "ACKReader",
    "NSFReader",
    # Converter
    "convert_dataset_to_hdf5",
    # Exceptions
    "PyICRPError",
    "InvalidNuclide",
    "InvalidAtomicNumber",
    "InvalidSymbol",
    "InvalidState",
    "ParseError",
    "InvalidHalfLife",
    "InvalidDecayMode",
    "InvalidRadiationType",
    "InvalidFloat",
    "InvalidInteger",
    "InvalidEnergy",
    "MalformedRecord",
    "InvalidFilePath",
    "DatasetIOError",
    "ConversionError",
]
