#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Tests for the RAD, BET, ACK and NSF spectrum readers

Covers record parsers, block grouping in file order, and errors for
truncated blocks and mismatched radiation codes.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from pyicrp.exceptions import (
    InvalidFloat,
    InvalidHalfLife,
    InvalidNuclide,
    InvalidRadiationType,
    MalformedRecord,
)
from pyicrp.models import Nuclide, RadiationType
from pyicrp.models.records import AckRecord, BetRecord, NsfRecord, RadRecord
from pyicrp.readers.spectrum import (
    ACKReader,
    BETReader,
    NSFReader,
    RADReader,
    parse_ack_record,
    parse_bet_record,
    parse_nsf_record,
    parse_rad_record,
    parse_spectrum_header,
)

CO60 = Nuclide(27, 60)


class TestRecordParsers:
    """Per-format record parsing"""

    def test_rad(self) -> None:
        rec = parse_rad_record(["1", "9.9850E-01", "1.1732E+00", "G"])
        assert rec == RadRecord(RadiationType.GAMMA, 0.9985, 1.1732)

    def test_rad_code_mismatch(self) -> None:
        with pytest.raises(InvalidRadiationType):
            parse_rad_record(["2", "1.0", "1.0", "G"])

    def test_rad_unknown_mnemonic(self) -> None:
        with pytest.raises(InvalidRadiationType):
            parse_rad_record(["1", "1.0", "1.0", "Q"])

    def test_rad_field_count(self) -> None:
        with pytest.raises(MalformedRecord):
            parse_rad_record(["1", "1.0", "1.0"])

    def test_bet(self) -> None:
        assert parse_bet_record(["5.0000E-02", "5.7600E+00"]) == BetRecord(0.05, 5.76)

    def test_ack(self) -> None:
        rec = parse_ack_record(["1.0800E-02", "1.5500E-02", "KLL"])
        assert rec == AckRecord(0.0108, 0.0155, "KLL")

    def test_nsf(self) -> None:
        assert parse_nsf_record(["1.0", "0.32"]) == NsfRecord(1.0, 0.32)

    def test_bad_number(self) -> None:
        with pytest.raises(InvalidFloat):
            parse_bet_record(["0.1", "lots"])


class TestSpectrumHeader:

    def test_with_half_life(self) -> None:
        assert parse_spectrum_header(["Co-60", "5.27y", "4"]) == (CO60, 4)

    def test_without_half_life(self) -> None:
        assert parse_spectrum_header(["Co-60", "3"]) == (CO60, 3)

    def test_bad_half_life(self) -> None:
        with pytest.raises(InvalidHalfLife):
            parse_spectrum_header(["Co-60", "5.27", "4"])

    def test_field_count(self) -> None:
        with pytest.raises(MalformedRecord):
            parse_spectrum_header(["Co-60"])


class TestRADReader:
    """Discrete-radiation file"""

    def test_blocks_appended_in_file_order(self, dataset_dir: Path) -> None:
        table = RADReader().read(dataset_dir / "ICRP-07.RAD")
        types = [rec.radiation_type.mnemonic for rec in table[CO60]]
        assert types == ["B-", "G", "G", "X", "IE"]

    def test_nuclides(self, dataset_dir: Path) -> None:
        table = RADReader().read(dataset_dir / "ICRP-07.RAD")
        assert [str(n) for n in table] == ["Co-60", "Tc-99m"]

    def test_values(self, dataset_dir: Path) -> None:
        table = RADReader().read(dataset_dir / "ICRP-07.RAD")
        gammas = [r for r in table[CO60] if r.radiation_type is RadiationType.GAMMA]
        assert [g.energy for g in gammas] == pytest.approx([1.1732, 1.3325])
        assert all(g.radiation_type.is_photon for g in gammas)

    def test_sequences_are_tuples(self, dataset_dir: Path) -> None:
        table = RADReader().read(dataset_dir / "ICRP-07.RAD")
        assert isinstance(table[CO60], tuple)

    def test_mismatch_located(self, tmp_path: Path) -> None:
        path = tmp_path / "ICRP-07.RAD"
        path.write_text(
            "Co-60 5.27y 2\n"
            " 1 9.9850E-01 1.1732E+00 G\n"
            " 5 9.9983E-01 1.3325E+00 G\n"
        )
        with pytest.raises(InvalidRadiationType) as excinfo:
            RADReader().read(path)
        assert excinfo.value.line_number == 3


class TestBlockErrors:
    """Structural errors shared by all spectrum files"""

    def test_truncated_block(self, tmp_path: Path) -> None:
        path = tmp_path / "ICRP-07.BET"
        path.write_text(
            "Co-60 1\n"
            " 0.0 1.0\n"
            "Mo-99 3\n"
            " 0.0 1.2\n"
        )
        with pytest.raises(MalformedRecord) as excinfo:
            BETReader().read(path)
        err = excinfo.value
        assert err.line_number == 3
        assert "file ends after 1" in str(err)

    def test_record_where_header_expected(self, tmp_path: Path) -> None:
        path = tmp_path / "ICRP-07.NSF"
        path.write_text(
            "Cf-252 1\n"
            " 1.0 0.3\n"
            " 2.0 0.1\n"
        )
        with pytest.raises(InvalidNuclide) as excinfo:
            NSFReader().read(path)
        assert excinfo.value.line_number == 3

    def test_empty_block(self, tmp_path: Path) -> None:
        path = tmp_path / "ICRP-07.ACK"
        path.write_text("H-3 12.32y 0\n")
        table = ACKReader().read(path)
        assert table[Nuclide(1, 3)] == ()


class TestOtherReaders:
    """BET, ACK and NSF files from the sample dataset"""

    def test_beta(self, dataset_dir: Path) -> None:
        table = BETReader().read(dataset_dir / "ICRP-07.BET")
        assert len(table[CO60]) == 3
        assert table[Nuclide(42, 99)][-1] == BetRecord(1.214, 0.0)

    def test_auger(self, dataset_dir: Path) -> None:
        table = ACKReader().read(dataset_dir / "ICRP-07.ACK")
        assert [r.transition for r in table[Nuclide(43, 99, 1)]] == ["KLL", "LMM"]

    def test_fission_neutron(self, dataset_dir: Path) -> None:
        table = NSFReader().read(dataset_dir / "ICRP-07.NSF")
        assert [r.energy for r in table[Nuclide(98, 252)]] == pytest.approx([0.01, 1.0, 10.0])
