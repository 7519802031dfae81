#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
HDF5 export of a loaded ICRP-07 dataset

Writes a deterministic, self-documenting HDF5 file from the tables of an
:class:`~pyicrp.dataset.icrp107.ICRP107Dataset`.

HDF5 Layout
-----------
::

    /metadata/                      attrs: source, n_nuclides
    /nuclides/
        Co-60/                      attrs: zai, half_life, half_life_s,
                                           decay_constant, decay_modes
            progeny/
                target              string[]
                decay_mode          string[]
                branching_fraction  float64[]
            rad/
                radiation_type      string[]
                intensity           float64[]   units: 1/nt
                energy              float64[]   units: MeV
            bet/
                energy              float64[]   units: MeV
                density             float64[]   units: 1/(MeV nt)
            ack/
                intensity           float64[]   units: 1/nt
                energy              float64[]   units: MeV
                transition          string[]
            nsf/
                energy              float64[]   units: MeV
                density             float64[]   units: 1/(MeV nt)

Nuclide groups follow index-file order.  A spectrum group is written only
for nuclides that have records of that kind.  Physical units are stored as
dataset attributes (``ds.attrs["units"] = "MeV"``).

References
----------
.. [1] HDF5 best practices, The HDF Group.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

import numpy as np

try:
    import h5py
except ImportError as _exc:  # pragma: no cover
    raise ImportError(
        "The 'h5py' package is required by the HDF5 converter.  "
        "Install it with: pip install h5py"
    ) from _exc

from pyicrp.dataset.icrp107 import ICRP107Dataset
from pyicrp.exceptions import ConversionError
from pyicrp.models.records import NuclideAttribute, records_to_arrays
from pyicrp.utils.constants import SPECTRUM_KINDS

logger = logging.getLogger(__name__)

SPECTRUM_COLUMNS: dict[str, tuple[str, tuple[tuple[str, str | None], ...]]] = {
    "discrete": ("rad", (("radiation_type", None), ("intensity", "1/nt"), ("energy", "MeV"))),
    "beta": ("bet", (("energy", "MeV"), ("density", "1/(MeV nt)"))),
    "auger": ("ack", (("intensity", "1/nt"), ("energy", "MeV"), ("transition", None))),
    "fission_neutron": ("nsf", (("energy", "MeV"), ("density", "1/(MeV nt)"))),
}
"""HDF5 group name and ``(column, units)`` pairs of each spectrum kind."""


# ---------------------------------------------------------------------------
# Internal writers
# ---------------------------------------------------------------------------

def _create_column(
    group: h5py.Group,
    name: str,
    data: np.ndarray,
    units: str | None = None,
) -> h5py.Dataset:
    """Create a float64 or variable-length string dataset

    Parameters
    ----------
    group : h5py.Group
        Parent group.
    name : str
        Dataset name.
    data : numpy.ndarray
        Float or ``object`` (string) array.
    units : str | None
        Physical units string stored as ``ds.attrs["units"]``.
    """
    if data.dtype == object and data.size == 0:
        ds = group.create_dataset(name, shape=(0,), dtype=h5py.string_dtype())
    elif data.dtype == object:
        ds = group.create_dataset(name, data=data, dtype=h5py.string_dtype())
    else:
        ds = group.create_dataset(name, data=np.asarray(data, dtype="f8"))
    if units is not None:
        ds.attrs["units"] = units
    return ds


def _write_attribute(group: h5py.Group, attr: NuclideAttribute) -> None:
    """Write index metadata and the progeny table of one nuclide"""
    group.attrs["zai"] = attr.nuclide.zai
    group.attrs["half_life"] = str(attr.half_life)
    group.attrs["half_life_s"] = attr.half_life.as_seconds()
    group.attrs["decay_constant"] = attr.half_life.as_lambda()
    group.attrs["decay_modes"] = "".join(str(mode) for mode in attr.decay_modes)

    prog = group.create_group("progeny")
    _create_column(prog, "target", np.asarray([str(p.nuclide) for p in attr.progeny], dtype=object))
    _create_column(prog, "decay_mode", np.asarray([str(p.decay_mode) for p in attr.progeny], dtype=object))
    _create_column(
        prog,
        "branching_fraction",
        np.asarray([p.branching_fraction for p in attr.progeny], dtype="f8"),
    )


def _write_spectrum(group: h5py.Group, kind: str, records: Sequence[object]) -> None:
    """Write the records of one spectrum kind for one nuclide"""
    name, columns = SPECTRUM_COLUMNS[kind]
    sub = group.create_group(name)
    arrays = records_to_arrays(records, [col for col, _ in columns])
    for col, units in columns:
        _create_column(sub, col, arrays[col], units)


def _check_kinds(kinds: Sequence[str]) -> None:
    unknown = [kind for kind in kinds if kind not in SPECTRUM_COLUMNS]
    if unknown:
        raise ValueError(
            f"Unknown spectrum kinds {unknown}.  Must be among: {list(SPECTRUM_COLUMNS)}"
        )


def write_dataset(
    h5f: h5py.File,
    dataset: ICRP107Dataset,
    kinds: Sequence[str] = SPECTRUM_KINDS,
) -> None:
    """Write the index and the selected spectrum tables to an open file

    Parameters
    ----------
    h5f : h5py.File
        Open HDF5 file handle (write mode).
    dataset : ICRP107Dataset
        Source dataset; tables are loaded on demand.
    kinds : Sequence[str], optional
        Spectrum kinds to include.  Default: all four.

    Raises
    ------
    ValueError
        If *kinds* names an unknown spectrum kind.
    """
    _check_kinds(kinds)
    index = dataset.index()
    spectra = {kind: dataset.table(kind) for kind in kinds}

    meta = h5f.create_group("metadata")
    meta.attrs["source"] = str(dataset.root)
    meta.attrs["n_nuclides"] = len(index)

    nuclides = h5f.create_group("nuclides", track_order=True)
    for nuclide, attr in index.items():
        group = nuclides.create_group(str(nuclide))
        _write_attribute(group, attr)
        for kind, table in spectra.items():
            records = table.get(nuclide)
            if records:
                _write_spectrum(group, kind, records)

    for kind, table in spectra.items():
        orphans = [str(n) for n in table if n not in index]
        if orphans:
            logger.warning(
                "%d %s nuclides are not in the index and were skipped: %s",
                len(orphans), kind, ", ".join(orphans[:5]),
            )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def convert_dataset_to_hdf5(
    root: Path | str | ICRP107Dataset,
    output_path: Path | str,
    *,
    kinds: Sequence[str] = SPECTRUM_KINDS,
    overwrite: bool = False,
) -> None:
    """Load an ICRP-07 dataset and write it to a structured HDF5 file

    Parameters
    ----------
    root : Path | str | ICRP107Dataset
        Dataset root directory, or an already opened dataset.
    output_path : Path | str
        Path for the output HDF5 file.  Parent directories are created
        automatically.
    kinds : Sequence[str], optional
        Spectrum kinds to include.  Default: all four.
    overwrite : bool, optional
        If ``True``, overwrite an existing HDF5 file.  If ``False``
        (default), raise :class:`~pyicrp.exceptions.ConversionError`
        when the output file already exists.

    Raises
    ------
    ConversionError
        If *overwrite* is ``False`` and *output_path* exists, or if
        any HDF5 write operation fails.
    InvalidFilePath
        If *root* is not a directory.
    DatasetIOError, ParseError, InvalidNuclide
        If a table cannot be loaded.

    Examples
    --------
    >>> convert_dataset_to_hdf5("ICRP-07", "output/icrp107.h5", overwrite=True)
    """
    _check_kinds(kinds)
    dataset = root if isinstance(root, ICRP107Dataset) else ICRP107Dataset.open(root)
    out = Path(output_path)

    if out.exists() and not overwrite:
        raise ConversionError(f"Output file {out} already exists and overwrite=False.")

    # Load before touching the output so read errors leave no partial file
    dataset.index()
    for kind in kinds:
        dataset.table(kind)

    out.parent.mkdir(parents=True, exist_ok=True)
    try:
        mode = "w" if overwrite else "w-"
        with h5py.File(str(out), mode) as h5f:
            write_dataset(h5f, dataset, kinds)
    except Exception as exc:
        raise ConversionError(f"Failed to write HDF5 file {out}: {exc}") from exc

    logger.info("Wrote ICRP-07 HDF5 file: %s", out)
