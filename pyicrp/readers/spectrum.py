#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
ICRP-07 spectrum readers (RAD, BET, ACK, NSF)

The readers expect whitespace-separated renditions of the spectrum files,
not the fixed-column files of the published ICRP-07 distribution.
All four spectrum files share one block structure.  A header line names
the nuclide and the number of records that follow::

    <nuclide> [<half-life>] <n>
    <record 1>
    ...
    <record n>

The half-life column is optional; when present it is checked but not
stored (the index table is the authority for half-lives).

Record Layouts
--------------
=====  =======================================  ==========================
File   Fields                                   Example
=====  =======================================  ==========================
RAD    icode, intensity, energy, mnemonic       ``1 9.9850E-01 1.1732E+00 G``
BET    energy, density                          ``1.0000E-02 2.3560E+00``
ACK    intensity, energy, transition            ``1.0800E-01 2.1700E-03 KLL``
NSF    energy, density                          ``5.0000E-01 3.1500E-01``
=====  =======================================  ==========================

Blocks for a nuclide already seen extend its sequence, so the records of
each nuclide always appear in file order.

References
----------
.. [1] ICRP Publication 107, Annex A — ICRP-07.RAD, .BET, .ACK, .NSF.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path
from types import MappingProxyType
from typing import Any

from pyicrp.exceptions import InvalidRadiationType, MalformedRecord, PyICRPError
from pyicrp.models.half_life import HalfLife
from pyicrp.models.nuclide import Nuclide
from pyicrp.models.records import (
    AckRecord,
    BetRecord,
    NsfRecord,
    RadiationType,
    RadRecord,
)
from pyicrp.readers.base import BaseReader
from pyicrp.utils.parsing import (
    iter_records,
    parse_count,
    parse_energy,
    parse_float,
    parse_int,
)

logger = logging.getLogger(__name__)


def _expect_fields(tokens: Sequence[str], n: int, kind: str) -> None:
    if len(tokens) != n:
        raise MalformedRecord(
            " ".join(tokens),
            f"{kind} record needs {n} fields, found {len(tokens)}",
        )


# ---------------------------------------------------------------------------
# Record parsers
# ---------------------------------------------------------------------------

def parse_spectrum_header(tokens: Sequence[str]) -> tuple[Nuclide, int]:
    """Parse a block header ``<nuclide> [<half-life>] <n>``

    Returns
    -------
    tuple[Nuclide, int]
        The nuclide and the number of records in the block.

    Raises
    ------
    MalformedRecord
        If the header has neither two nor three fields.
    InvalidNuclide, InvalidHalfLife, InvalidInteger
        For the corresponding malformed field.
    """
    if len(tokens) not in (2, 3):
        raise MalformedRecord(
            " ".join(tokens),
            f"block header needs 2 or 3 fields, found {len(tokens)}",
        )
    nuclide = Nuclide.from_str(tokens[0])
    if len(tokens) == 3:
        HalfLife.from_str(tokens[1])
    return nuclide, parse_count(tokens[-1])


def parse_rad_record(tokens: Sequence[str]) -> RadRecord:
    """Parse a discrete-radiation record ``icode intensity energy mnemonic``

    Raises
    ------
    InvalidRadiationType
        If the mnemonic is unknown or names a different type than *icode*.

    Examples
    --------
    >>> parse_rad_record(["1", "9.9850E-01", "1.1732E+00", "G"]).radiation_type
    <RadiationType.GAMMA: (1, 'G')>
    """
    _expect_fields(tokens, 4, "RAD")
    icode = parse_int(tokens[0])
    intensity = parse_float(tokens[1])
    energy = parse_energy(tokens[2])
    radiation_type = RadiationType.from_mnemonic(tokens[3])
    if radiation_type.icode != icode:
        raise InvalidRadiationType(
            f"{tokens[0]} {tokens[3]}",
            f"code {icode} does not match mnemonic {tokens[3]!r}",
        )
    return RadRecord(radiation_type=radiation_type, intensity=intensity, energy=energy)


def parse_bet_record(tokens: Sequence[str]) -> BetRecord:
    """Parse a beta-spectrum point ``energy density``"""
    _expect_fields(tokens, 2, "BET")
    return BetRecord(energy=parse_energy(tokens[0]), density=parse_float(tokens[1]))


def parse_ack_record(tokens: Sequence[str]) -> AckRecord:
    """Parse an auger/CK electron line ``intensity energy transition``"""
    _expect_fields(tokens, 3, "ACK")
    return AckRecord(
        intensity=parse_float(tokens[0]),
        energy=parse_energy(tokens[1]),
        transition=tokens[2],
    )


def parse_nsf_record(tokens: Sequence[str]) -> NsfRecord:
    """Parse a fission-neutron spectrum point ``energy density``"""
    _expect_fields(tokens, 2, "NSF")
    return NsfRecord(energy=parse_energy(tokens[0]), density=parse_float(tokens[1]))


# ---------------------------------------------------------------------------
# Readers
# ---------------------------------------------------------------------------

class SpectrumReader(BaseReader):
    """Block-structured spectrum reader

    Subclasses set :attr:`parse_record` to the record parser of their
    file format.
    """

    parse_record: Callable[[Sequence[str]], Any]

    def read(self, path: Path | str) -> Mapping[Nuclide, tuple[Any, ...]]:
        filepath = Path(path)
        text = self._read_text(filepath)

        table: dict[Nuclide, list[Any]] = {}
        n_records = 0
        lines = iter_records(text)
        for line_number, tokens, raw in lines:
            try:
                nuclide, count = parse_spectrum_header(tokens)
            except PyICRPError as exc:
                exc.locate(filepath, line_number)
                raise

            records = table.setdefault(nuclide, [])
            for read_so_far in range(count):
                item = next(lines, None)
                if item is None:
                    raise MalformedRecord(
                        raw,
                        f"block declares {count} records, file ends after {read_so_far}",
                    ).locate(filepath, line_number)

                rec_line, rec_tokens, _ = item
                try:
                    records.append(self.parse_record(rec_tokens))
                except PyICRPError as exc:
                    exc.locate(filepath, rec_line)
                    raise
            n_records += count

        logger.debug(
            "Loaded %d records for %d nuclides from %s",
            n_records, len(table), filepath.name,
        )
        return MappingProxyType({nuclide: tuple(recs) for nuclide, recs in table.items()})


class RADReader(SpectrumReader):
    """Reader for ICRP-07.RAD (discrete radiations)"""

    parse_record = staticmethod(parse_rad_record)


class BETReader(SpectrumReader):
    """Reader for ICRP-07.BET (beta spectra)"""

    parse_record = staticmethod(parse_bet_record)


class ACKReader(SpectrumReader):
    """Reader for ICRP-07.ACK (auger and Coster-Kronig electrons)"""

    parse_record = staticmethod(parse_ack_record)


class NSFReader(SpectrumReader):
    """Reader for ICRP-07.NSF (spontaneous-fission neutron spectra)"""

    parse_record = staticmethod(parse_nsf_record)
