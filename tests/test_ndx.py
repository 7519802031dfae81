#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Tests for the ICRP-07 index reader

Covers record parsing, the table built from a whole file, and fail-fast
error reporting with file and line location.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from pyicrp.exceptions import (
    DatasetIOError,
    InvalidDecayMode,
    InvalidEnergy,
    InvalidHalfLife,
    InvalidNuclide,
    MalformedRecord,
)
from pyicrp.models import DecayMode, Nuclide, TimeUnit
from pyicrp.readers.ndx import IndexReader, parse_index_record


class TestParseIndexRecord:
    """Single-record parsing"""

    def test_mo99(self) -> None:
        tokens = "Mo-99 65.94h B- 0 3.904E-01 1.506E-01 2 Tc-99m B- 0.8773 Tc-99 B- 0.1227".split()
        attr = parse_index_record(tokens)
        assert attr.nuclide == Nuclide(42, 99)
        assert attr.half_life.value == pytest.approx(65.94)
        assert attr.half_life.unit is TimeUnit.HOUR
        assert attr.decay_modes == (DecayMode.BETA_MINUS,)
        assert attr.electron_energy == pytest.approx(0.3904)
        assert [str(p.nuclide) for p in attr.progeny] == ["Tc-99m", "Tc-99"]
        assert [p.branching_fraction for p in attr.progeny] == pytest.approx([0.8773, 0.1227])

    def test_no_progeny(self) -> None:
        attr = parse_index_record("Tl-208 3.053m B- 0 0.56 3.37 0".split())
        assert attr.progeny == ()

    def test_branching_not_normalised(self) -> None:
        tokens = "Tc-99m 6.015h ITB- 0 0 0 2 Tc-99 IT 0.9 Ru-99 B- 0.3".split()
        attr = parse_index_record(tokens)
        assert sum(p.branching_fraction for p in attr.progeny) == pytest.approx(1.2)

    def test_too_few_fields(self) -> None:
        with pytest.raises(MalformedRecord):
            parse_index_record("Co-60 5.27y B-".split())

    def test_progeny_count_mismatch(self) -> None:
        with pytest.raises(MalformedRecord):
            parse_index_record("Co-60 5.27y B- 0 0 0 2 Ni-60 B- 1.0".split())

    def test_bad_half_life(self) -> None:
        with pytest.raises(InvalidHalfLife):
            parse_index_record("Co-60 5.27q B- 0 0 0 0".split())

    def test_bad_decay_mode(self) -> None:
        with pytest.raises(InvalidDecayMode):
            parse_index_record("Co-60 5.27y BX 0 0 0 0".split())

    def test_negative_energy(self) -> None:
        with pytest.raises(InvalidEnergy):
            parse_index_record("Co-60 5.27y B- 0 -1 0 0".split())

    def test_bad_daughter(self) -> None:
        with pytest.raises(InvalidNuclide):
            parse_index_record("Co-60 5.27y B- 0 0 0 1 Zz-60 B- 1.0".split())


class TestIndexReader:
    """Whole-file reading"""

    def test_reads_all_records(self, dataset_dir: Path) -> None:
        table = IndexReader().read(dataset_dir / "ICRP-07.NDX")
        assert len(table) == 5
        assert [str(n) for n in table] == ["Co-60", "Mo-99", "Tc-99m", "Tc-99", "Cf-252"]

    def test_lookup_by_any_spelling(self, dataset_dir: Path) -> None:
        table = IndexReader().read(dataset_dir / "ICRP-07.NDX")
        assert table[Nuclide.from_str("tc99M")].decay_modes == (
            DecayMode.ISOMERIC_TRANSITION,
            DecayMode.BETA_MINUS,
        )

    def test_table_is_read_only(self, dataset_dir: Path) -> None:
        table = IndexReader().read(dataset_dir / "ICRP-07.NDX")
        with pytest.raises(TypeError):
            table[Nuclide(1, 3)] = None  # type: ignore[index]

    def test_error_located(self, tmp_path: Path) -> None:
        path = tmp_path / "ICRP-07.NDX"
        path.write_text(
            "# comment\n"
            "Co-60 5.27y B- 0 0 0 1 Ni-60 B- 1.0\n"
            "\n"
            "Mo-99 65.94x B- 0 0 0 0\n"
        )
        with pytest.raises(InvalidHalfLife) as excinfo:
            IndexReader().read(path)
        err = excinfo.value
        assert err.path == path
        assert err.line_number == 4
        assert "ICRP-07.NDX, line 4" in str(err)

    def test_header_line_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "ICRP-07.NDX"
        path.write_text(
            "ICRP-07 nuclear decay data index\n"
            "Co-60 5.27y B- 0 0 0 1 Ni-60 B- 1.0\n"
        )
        with pytest.raises(MalformedRecord) as excinfo:
            IndexReader().read(path)
        assert excinfo.value.line_number == 1

    def test_duplicate_record(self, tmp_path: Path) -> None:
        path = tmp_path / "ICRP-07.NDX"
        path.write_text(
            "Co-60 5.27y B- 0 0 0 0\n"
            "co60 5.27y B- 0 0 0 0\n"
        )
        with pytest.raises(MalformedRecord) as excinfo:
            IndexReader().read(path)
        assert excinfo.value.line_number == 2

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "ICRP-07.NDX"
        path.write_text("# nothing here\n")
        assert len(IndexReader().read(path)) == 0

    def test_missing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "ICRP-07.NDX"
        with pytest.raises(DatasetIOError) as excinfo:
            IndexReader().read(path)
        assert excinfo.value.path == path
        assert isinstance(excinfo.value.__cause__, FileNotFoundError)
