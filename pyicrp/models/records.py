#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Typed records for ICRP-07 parsed tables

Every record is a frozen ``dataclass``.  Records are the sole output of the
reader layer and the sole input accepted by the converter layer.

Hierarchy
---------
::

    NuclideAttribute   — one index (NDX) entry: half-life, modes, progeny
    RadRecord          — one discrete radiation (RAD)
    BetRecord          — one beta-spectrum point (BET)
    AckRecord          — one auger / Coster-Kronig electron line (ACK)
    NsfRecord          — one fission-neutron spectrum point (NSF)

Units
-----
* Energies are in **MeV**.
* Intensities are yields per nuclear transformation.
* Spectrum densities are particles per MeV per nuclear transformation.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Union

import numpy as np

from pyicrp.exceptions import InvalidRadiationType
from pyicrp.models.half_life import HalfLife
from pyicrp.models.nuclide import DecayMode, Nuclide, Progeny


# ---------------------------------------------------------------------------
# Index table
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class NuclideAttribute:
    """Decay metadata for one nuclide (one NDX record)

    Parameters
    ----------
    nuclide : Nuclide
        The parent nuclide.
    half_life : HalfLife
        Physical half-life.
    decay_modes : tuple[DecayMode, ...]
        All decay modes of the nuclide in file order.
    alpha_energy : float
        Mean alpha energy emitted per transformation (MeV).
    electron_energy : float
        Mean electron energy emitted per transformation (MeV).
    photon_energy : float
        Mean photon energy emitted per transformation (MeV).
    progeny : tuple[Progeny, ...]
        Decay products in file order.
    """

    nuclide: Nuclide
    half_life: HalfLife
    decay_modes: tuple[DecayMode, ...]
    alpha_energy: float
    electron_energy: float
    photon_energy: float
    progeny: tuple[Progeny, ...] = ()


# ---------------------------------------------------------------------------
# Spectrum records
# ---------------------------------------------------------------------------

class RadiationType(Enum):
    """ICRP-07 radiation type: ``(icode, mnemonic)``"""

    GAMMA = (1, "G")
    X_RAY = (2, "X")
    ANNIHILATION = (3, "AQ")
    BETA_PLUS = (4, "B+")
    BETA_MINUS = (5, "B-")
    INTERNAL_CONVERSION = (6, "IE")
    AUGER = (7, "AE")
    ALPHA = (8, "A")
    ALPHA_RECOIL = (9, "AR")
    FISSION_FRAGMENT = (10, "FF")
    NEUTRON = (11, "N")

    @property
    def icode(self) -> int:
        return self.value[0]

    @property
    def mnemonic(self) -> str:
        return self.value[1]

    @property
    def is_photon(self) -> bool:
        return self in (RadiationType.GAMMA, RadiationType.X_RAY, RadiationType.ANNIHILATION)

    @classmethod
    def from_icode(cls, icode: int) -> RadiationType:
        for member in cls:
            if member.icode == icode:
                return member
        raise InvalidRadiationType(str(icode), "unknown radiation code")

    @classmethod
    def from_mnemonic(cls, mnemonic: str) -> RadiationType:
        for member in cls:
            if member.mnemonic == mnemonic:
                return member
        raise InvalidRadiationType(mnemonic, "unknown radiation mnemonic")

    def __str__(self) -> str:
        return self.mnemonic


@dataclass(frozen=True)
class RadRecord:
    """A discrete radiation emitted per transformation

    Parameters
    ----------
    radiation_type : RadiationType
        Kind of radiation.
    intensity : float
        Yield per nuclear transformation.
    energy : float
        Radiation energy (MeV).
    """

    radiation_type: RadiationType
    intensity: float
    energy: float


@dataclass(frozen=True)
class BetRecord:
    """One point of a beta-particle spectrum

    Parameters
    ----------
    energy : float
        Beta energy (MeV).
    density : float
        Number of betas per MeV per nuclear transformation.
    """

    energy: float
    density: float


@dataclass(frozen=True)
class AckRecord:
    """An auger or Coster-Kronig electron line

    Parameters
    ----------
    intensity : float
        Yield per nuclear transformation.
    energy : float
        Electron energy (MeV).
    transition : str
        Shell-transition label as written in the file (e.g. ``"KLL"``).
    """

    intensity: float
    energy: float
    transition: str


@dataclass(frozen=True)
class NsfRecord:
    """One point of a spontaneous-fission neutron spectrum

    Parameters
    ----------
    energy : float
        Neutron energy (MeV).
    density : float
        Number of neutrons per MeV per nuclear transformation.
    """

    energy: float
    density: float


SpectrumRecord = Union[RadRecord, BetRecord, AckRecord, NsfRecord]
"""Type alias for the union of all spectrum record types."""


# ---------------------------------------------------------------------------
# Array helpers
# ---------------------------------------------------------------------------

def records_to_arrays(
    records: Sequence[object],
    fields: Sequence[str],
) -> dict[str, np.ndarray]:
    """Collect record attributes into aligned column arrays

    Parameters
    ----------
    records : Sequence
        Records of a single type, in the order they should appear.
    fields : Sequence[str]
        Attribute names to extract.

    Returns
    -------
    dict[str, numpy.ndarray]
        One array per field, each of shape ``(len(records),)``.  Float
        attributes become ``float64``; enum attributes are replaced by
        their text form and, like strings, stored with ``object`` dtype.

    Examples
    --------
    >>> cols = records_to_arrays([BetRecord(0.0, 2.0), BetRecord(0.1, 1.5)],
    ...                          ["energy", "density"])
    >>> cols["energy"]
    array([0. , 0.1])
    """
    columns: dict[str, np.ndarray] = {}
    for name in fields:
        values = [getattr(rec, name) for rec in records]
        if values and all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in values):
            columns[name] = np.asarray(values, dtype="f8")
        elif not values:
            columns[name] = np.zeros(0, dtype="f8")
        else:
            columns[name] = np.asarray([str(v) for v in values], dtype=object)
    return columns
