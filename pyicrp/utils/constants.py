#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Fixed tables and file names used across PyICRP

The dataset layout is fixed by ICRP Publication 107: every table lives
under the dataset root with a fixed file name, so nothing here is meant
to be configured at run time.

References
----------
.. [1] ICRP, 2008. Nuclear Decay Data for Dosimetric Calculations.
   ICRP Publication 107. Ann. ICRP 38 (3).
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Time units
# ---------------------------------------------------------------------------

DAYS_PER_YEAR: float = 365.2422
"""Length of the (tropical) year in days, as used by ICRP-07 half-lives."""

SECONDS_PER_UNIT: dict[str, float] = {
    "us": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3_600.0,
    "d": 86_400.0,
    "y": DAYS_PER_YEAR * 86_400.0,
}
"""Seconds per half-life unit code."""


# ---------------------------------------------------------------------------
# Dataset files
# ---------------------------------------------------------------------------

DATASET_FILES: dict[str, str] = {
    "index": "ICRP-07.NDX",
    "discrete": "ICRP-07.RAD",
    "beta": "ICRP-07.BET",
    "auger": "ICRP-07.ACK",
    "fission_neutron": "ICRP-07.NSF",
}
"""File name of each table, keyed by table kind."""

SPECTRUM_KINDS: tuple[str, ...] = ("discrete", "beta", "auger", "fission_neutron")
"""Table kinds holding per-nuclide spectrum sequences."""

COMMENT_PREFIX: str = "#"
"""Lines starting with this prefix are ignored by the table readers."""


# ---------------------------------------------------------------------------
# Periodic table  (Z = 1 … 118)
# ---------------------------------------------------------------------------

ELEMENT_SYMBOLS: tuple[str, ...] = (
    "",
    "H", "He", "Li", "Be", "B", "C", "N", "O", "F", "Ne",
    "Na", "Mg", "Al", "Si", "P", "S", "Cl", "Ar", "K", "Ca",
    "Sc", "Ti", "V", "Cr", "Mn", "Fe", "Co", "Ni", "Cu", "Zn",
    "Ga", "Ge", "As", "Se", "Br", "Kr", "Rb", "Sr", "Y", "Zr",
    "Nb", "Mo", "Tc", "Ru", "Rh", "Pd", "Ag", "Cd", "In", "Sn",
    "Sb", "Te", "I", "Xe", "Cs", "Ba", "La", "Ce", "Pr", "Nd",
    "Pm", "Sm", "Eu", "Gd", "Tb", "Dy", "Ho", "Er", "Tm", "Yb",
    "Lu", "Hf", "Ta", "W", "Re", "Os", "Ir", "Pt", "Au", "Hg",
    "Tl", "Pb", "Bi", "Po", "At", "Rn", "Fr", "Ra", "Ac", "Th",
    "Pa", "U", "Np", "Pu", "Am", "Cm", "Bk", "Cf", "Es", "Fm",
    "Md", "No", "Lr", "Rf", "Db", "Sg", "Bh", "Hs", "Mt", "Ds",
    "Rg", "Cn", "Nh", "Fl", "Mc", "Lv", "Ts", "Og",
)
"""Element symbols indexed by atomic number; index 0 is unused."""

SYMBOL_TO_Z: dict[str, int] = {
    symbol: Z for Z, symbol in enumerate(ELEMENT_SYMBOLS) if symbol
}
"""Reverse look-up from element symbol (``"Co"``) to atomic number."""
