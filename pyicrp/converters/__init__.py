#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Converters from loaded ICRP-07 tables to other storage formats

* :func:`~pyicrp.converters.hdf5.convert_dataset_to_hdf5` — load a dataset
  and write every table to one HDF5 file.
"""

from __future__ import annotations

from pyicrp.converters.hdf5 import convert_dataset_to_hdf5, write_dataset

__all__ = ["convert_dataset_to_hdf5", "write_dataset"]
