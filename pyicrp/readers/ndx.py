#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
ICRP-07 index (NDX) reader

Parses the nuclide index file and returns a read-only mapping from
:class:`~pyicrp.models.nuclide.Nuclide` to
:class:`~pyicrp.models.records.NuclideAttribute`.

Input Format
------------
The reader expects a whitespace-separated rendition of the index, one
record per nuclide, with blank lines and ``#`` lines ignored.  The
published ICRP-07.NDX distribution file uses fixed columns and opens with
a header line; it must be converted to this layout before reading.  Fed
in unchanged, it fails with a parse error located at its first line.

Record Layout
-------------
One record per line, whitespace separated::

    <nuclide> <half-life> <modes> <E_alpha> <E_electron> <E_photon> <k> {<daughter> <mode> <fraction>}*k

==========  ===============================================  =============
Field       Content                                          Example
==========  ===============================================  =============
nuclide     parent name                                      ``Mo-99``
half-life   ``<number><unit>``                               ``65.94h``
modes       concatenated decay-mode codes                    ``B-``
E_alpha     mean alpha energy per transformation (MeV)       ``0.0000E+00``
E_electron  mean electron energy per transformation (MeV)    ``3.9040E-01``
E_photon    mean photon energy per transformation (MeV)      ``1.5060E-01``
k           number of daughters                              ``2``
daughter    daughter name                                    ``Tc-99m``
mode        single decay-mode code feeding the daughter      ``B-``
fraction    branching fraction                               ``8.7730E-01``
==========  ===============================================  =============

References
----------
.. [1] ICRP Publication 107, Annex A — ICRP-07.NDX.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from types import MappingProxyType

from pyicrp.exceptions import MalformedRecord, PyICRPError
from pyicrp.models.half_life import HalfLife
from pyicrp.models.nuclide import DecayMode, Nuclide, Progeny
from pyicrp.models.records import NuclideAttribute
from pyicrp.readers.base import BaseReader
from pyicrp.utils.parsing import iter_records, parse_count, parse_energy, parse_float

logger = logging.getLogger(__name__)

FIXED_FIELDS: int = 7
"""Number of fields preceding the progeny triples."""

FIELDS_PER_PROGENY: int = 3
"""Fields per progeny entry: daughter, mode, fraction."""


def parse_index_record(tokens: Sequence[str]) -> NuclideAttribute:
    """Parse one tokenized NDX record

    Parameters
    ----------
    tokens : Sequence[str]
        Whitespace-split fields of one line.

    Returns
    -------
    NuclideAttribute
        The parsed index entry.

    Raises
    ------
    MalformedRecord
        If the field count does not match the declared progeny count.
    InvalidNuclide
        If the parent or a daughter name is malformed.
    InvalidHalfLife, InvalidDecayMode, InvalidFloat, InvalidInteger, InvalidEnergy
        For the corresponding malformed field.

    Examples
    --------
    >>> attr = parse_index_record(
    ...     "Co-60 5.27y B- 0 9.649E-02 2.504E+00 1 Ni-60 B- 1.0".split())
    >>> attr.progeny[0].nuclide
    Nuclide(atomic_number=28, mass_number=60, state=0)
    """
    if len(tokens) < FIXED_FIELDS:
        raise MalformedRecord(" ".join(tokens), f"expected at least {FIXED_FIELDS} fields")

    nuclide = Nuclide.from_str(tokens[0])
    half_life = HalfLife.from_str(tokens[1])
    decay_modes = DecayMode.split(tokens[2])
    alpha_energy = parse_energy(tokens[3])
    electron_energy = parse_energy(tokens[4])
    photon_energy = parse_energy(tokens[5])
    n_progeny = parse_count(tokens[6])

    expected = FIXED_FIELDS + FIELDS_PER_PROGENY * n_progeny
    if len(tokens) != expected:
        raise MalformedRecord(
            " ".join(tokens),
            f"{n_progeny} progeny need {expected} fields, found {len(tokens)}",
        )

    progeny = []
    for start in range(FIXED_FIELDS, expected, FIELDS_PER_PROGENY):
        daughter, mode, fraction = tokens[start:start + FIELDS_PER_PROGENY]
        progeny.append(
            Progeny(
                nuclide=Nuclide.from_str(daughter),
                decay_mode=DecayMode.from_code(mode),
                branching_fraction=parse_float(fraction),
            )
        )

    return NuclideAttribute(
        nuclide=nuclide,
        half_life=half_life,
        decay_modes=decay_modes,
        alpha_energy=alpha_energy,
        electron_energy=electron_energy,
        photon_energy=photon_energy,
        progeny=tuple(progeny),
    )


class IndexReader(BaseReader):
    """Reader for the ICRP-07 nuclide index

    Each nuclide may appear once; a repeated nuclide is reported as a
    :class:`~pyicrp.exceptions.MalformedRecord`.

    Examples
    --------
    >>> table = IndexReader().read("ICRP-07/ICRP-07.NDX")
    >>> table[Nuclide.from_str("Co-60")].half_life
    HalfLife(value=5.2713, unit=<TimeUnit.YEAR: 'y'>)
    """

    def read(self, path: Path | str) -> Mapping[Nuclide, NuclideAttribute]:
        filepath = Path(path)
        text = self._read_text(filepath)

        table: dict[Nuclide, NuclideAttribute] = {}
        for line_number, tokens, raw in iter_records(text):
            try:
                attr = parse_index_record(tokens)
                if attr.nuclide in table:
                    raise MalformedRecord(raw, f"duplicate index record for {attr.nuclide}")
            except PyICRPError as exc:
                exc.locate(filepath, line_number)
                raise
            table[attr.nuclide] = attr

        logger.debug("Loaded %d index records from %s", len(table), filepath.name)
        return MappingProxyType(table)
