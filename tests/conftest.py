#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared pytest fixtures for PyICRP tests

Provides a synthetic ICRP-07 dataset (a handful of nuclides in all five
table files) for testing parsers, readers, the dataset cache and the HDF5
converter without requiring the real ICRP-07 files.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from pyicrp.dataset import ICRP107Dataset
from pyicrp.models import DecayMode, HalfLife, Nuclide, NuclideAttribute, Progeny

NDX_TEXT = """\
# ICRP-07 index, synthetic subset
Co-60    5.27y      B-    0.0000E+00 9.6490E-02 2.5038E+00 1 Ni-60 B- 1.0000E+00
Mo-99    65.94h     B-    0.0000E+00 3.9040E-01 1.5060E-01 2 Tc-99m B- 8.7730E-01 Tc-99 B- 1.2270E-01
Tc-99m   6.015h     ITB-  0.0000E+00 1.6140E-02 1.2630E-01 2 Tc-99 IT 9.9996E-01 Ru-99 B- 3.7000E-05

Tc-99    2.111E+5y  B-    0.0000E+00 8.4600E-02 0.0000E+00 1 Ru-99 B- 1.0000E+00
Cf-252   2.645y     ASF   5.9250E+00 5.6000E-03 1.1640E-02 1 Cm-248 A 9.6908E-01
"""

RAD_TEXT = """\
Co-60    5.27y      4
 5 9.9880E-01 9.5770E-02  B-
 1 9.9850E-01 1.1732E+00  G
 1 9.9983E-01 1.3325E+00  G
 2 2.2000E-05 7.4720E-03  X
Tc-99m   6.015h     2
 1 8.8500E-01 1.4051E-01  G
 6 8.7900E-02 1.1944E-01  IE
Co-60    5.27y      1
 6 1.1000E-04 1.1649E+00  IE
"""

BET_TEXT = """\
Co-60    3
 0.0000E+00 3.5500E+00
 5.0000E-02 5.7600E+00
 3.1790E-01 0.0000E+00
Mo-99    2
 0.0000E+00 1.2000E+00
 1.2140E+00 0.0000E+00
"""

ACK_TEXT = """\
Tc-99m   6.015h     2
 1.0800E-02 1.5500E-02 KLL
 9.9000E-02 2.1700E-03 LMM
"""

NSF_TEXT = """\
Cf-252   2.645y     3
 1.0000E-02 4.5000E-02
 1.0000E+00 3.2000E-01
 1.0000E+01 2.0000E-03
"""

DATASET_TEXTS: dict[str, str] = {
    "ICRP-07.NDX": NDX_TEXT,
    "ICRP-07.RAD": RAD_TEXT,
    "ICRP-07.BET": BET_TEXT,
    "ICRP-07.ACK": ACK_TEXT,
    "ICRP-07.NSF": NSF_TEXT,
}


def write_dataset_files(root: Path, **overrides: str | None) -> Path:
    """Write the synthetic tables to *root*

    Keyword arguments replace a file's content by its extension, e.g.
    ``NDX="..."``.  Passing ``None`` omits the file.
    """
    root.mkdir(parents=True, exist_ok=True)
    for name, text in DATASET_TEXTS.items():
        ext = name.rsplit(".", 1)[1]
        content = overrides.get(ext, text)
        if content is not None:
            (root / name).write_text(content, encoding="ascii")
    return root


@pytest.fixture(autouse=True)
def fresh_shared_datasets() -> Iterator[None]:
    """Drop instances registered by ICRP107Dataset.open after each test"""
    yield
    ICRP107Dataset.clear_shared()


@pytest.fixture
def dataset_dir(tmp_path: Path) -> Path:
    """Directory holding all five synthetic ICRP-07 tables"""
    return write_dataset_files(tmp_path / "ICRP-07")


@pytest.fixture
def make_dataset(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing the synthetic tables with per-file overrides"""

    def make(**overrides: str | None) -> Path:
        return write_dataset_files(tmp_path / "ICRP-07", **overrides)

    return make


@pytest.fixture
def ndx_text() -> str:
    """Content of the synthetic index file"""
    return NDX_TEXT


@pytest.fixture
def sample_attributes() -> list[NuclideAttribute]:
    """In-memory index records for Co-60 and Mo-99"""
    co60 = Nuclide(27, 60)
    mo99 = Nuclide(42, 99)
    return [
        NuclideAttribute(
            nuclide=co60,
            half_life=HalfLife.from_str("5.27y"),
            decay_modes=(DecayMode.BETA_MINUS,),
            alpha_energy=0.0,
            electron_energy=9.649e-02,
            photon_energy=2.5038,
            progeny=(Progeny(Nuclide(28, 60), DecayMode.BETA_MINUS, 1.0),),
        ),
        NuclideAttribute(
            nuclide=mo99,
            half_life=HalfLife.from_str("65.94h"),
            decay_modes=(DecayMode.BETA_MINUS,),
            alpha_energy=0.0,
            electron_energy=0.3904,
            photon_energy=0.1506,
            progeny=(
                Progeny(Nuclide(43, 99, 1), DecayMode.BETA_MINUS, 0.8773),
                Progeny(Nuclide(43, 99), DecayMode.BETA_MINUS, 0.1227),
            ),
        ),
    ]
