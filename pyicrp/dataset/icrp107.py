#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
ICRP Publication 107 dataset façade

:class:`ICRP107Dataset` holds the dataset root and one
:class:`~pyicrp.dataset.cache.OnceCell` per table.  Each accessor reads its
table file on first use and hands out the same immutable mapping
afterwards.

Dataset Layout
--------------
::

    <root>/
        ICRP-07.NDX     ← index: half-life, decay modes, progeny
        ICRP-07.RAD     ← discrete radiations
        ICRP-07.BET     ← beta spectra
        ICRP-07.ACK     ← auger / Coster-Kronig electron spectra
        ICRP-07.NSF     ← spontaneous-fission neutron spectra

Sharing
-------
Constructing :class:`ICRP107Dataset` directly gives an instance with its
own empty cache.  :meth:`ICRP107Dataset.open` returns one shared instance
per resolved root, so every part of a program that opens the same root
observes the same cached tables.  Shared instances live until
:meth:`ICRP107Dataset.clear_shared` is called or the process exits.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from pathlib import Path
from typing import Any, ClassVar

from pyicrp.dataset.cache import OnceCell
from pyicrp.decay import IndexedDecayData
from pyicrp.exceptions import InvalidFilePath
from pyicrp.models.nuclide import Nuclide
from pyicrp.models.records import (
    AckRecord,
    BetRecord,
    NsfRecord,
    NuclideAttribute,
    RadRecord,
)
from pyicrp.readers.base import BaseReader
from pyicrp.readers.ndx import IndexReader
from pyicrp.readers.spectrum import ACKReader, BETReader, NSFReader, RADReader
from pyicrp.utils.constants import DATASET_FILES

logger = logging.getLogger(__name__)

READERS: dict[str, type[BaseReader]] = {
    "index": IndexReader,
    "discrete": RADReader,
    "beta": BETReader,
    "auger": ACKReader,
    "fission_neutron": NSFReader,
}
"""Reader class of each table kind."""


class ICRP107Dataset(IndexedDecayData):
    """Lazily loaded ICRP-07 decay dataset

    Parameters
    ----------
    root : Path | str
        Directory holding the ICRP-07 table files.

    Raises
    ------
    InvalidFilePath
        If *root* is not an existing directory.

    Notes
    -----
    A failed load raises to the caller and leaves the table's cell empty;
    the next access retries.  Concurrent first accesses to one table
    trigger a single read.

    Examples
    --------
    >>> data = ICRP107Dataset.open("ICRP-07")
    >>> data.half_life("Co-60")
    HalfLife(value=5.2713, unit=<TimeUnit.YEAR: 'y'>)
    >>> [str(p.nuclide) for p in data.progeny("Mo-99")]
    ['Tc-99m', 'Tc-99']
    """

    _shared: ClassVar[dict[Path, ICRP107Dataset]] = {}
    _shared_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, root: Path | str) -> None:
        path = Path(root)
        if not path.is_dir():
            raise InvalidFilePath(path)
        self.root = path
        self._cells: dict[str, OnceCell[Any]] = {kind: OnceCell() for kind in DATASET_FILES}

    @classmethod
    def open(cls, root: Path | str) -> ICRP107Dataset:
        """Return the shared dataset instance for *root*

        Raises
        ------
        InvalidFilePath
            If *root* is not an existing directory.
        """
        path = Path(root)
        if not path.is_dir():
            raise InvalidFilePath(path)
        key = path.resolve()
        with cls._shared_lock:
            dataset = cls._shared.get(key)
            if dataset is None:
                dataset = cls._shared[key] = cls(key)
                logger.debug("Opened ICRP-07 dataset at %s", key)
        return dataset

    @classmethod
    def clear_shared(cls) -> None:
        """Forget every instance handed out by :meth:`open`

        Instances already held by callers keep their cached tables; the
        next :meth:`open` of any root builds a fresh instance.
        """
        with cls._shared_lock:
            cls._shared.clear()

    def __repr__(self) -> str:
        loaded = [kind for kind in DATASET_FILES if self.is_loaded(kind)]
        return f"ICRP107Dataset(root={str(self.root)!r}, loaded={loaded})"

    # -- Table access ---------------------------------------------------------

    def path_of(self, kind: str) -> Path:
        """Location of the table file for *kind*"""
        return self.root / DATASET_FILES[kind]

    def is_loaded(self, kind: str) -> bool:
        """Whether the *kind* table has been loaded successfully"""
        return self._cells[kind].is_set()

    def table(self, kind: str) -> Mapping[Nuclide, Any]:
        """Return the *kind* table, reading its file on first use

        Parameters
        ----------
        kind : str
            One of ``"index"``, ``"discrete"``, ``"beta"``, ``"auger"``,
            ``"fission_neutron"``.

        Raises
        ------
        KeyError
            If *kind* is not a table kind.
        DatasetIOError
            If the file cannot be read.
        ParseError, InvalidNuclide
            If the file is malformed.
        """
        cell = self._cells[kind]
        return cell.get_or_try_init(lambda: self._load(kind))

    def _load(self, kind: str) -> Mapping[Nuclide, Any]:
        path = self.path_of(kind)
        logger.debug("Loading %s table from %s", kind, path)
        return READERS[kind]().read(path)

    def index(self) -> Mapping[Nuclide, NuclideAttribute]:
        """Index table (``ICRP-07.NDX``)"""
        return self.table("index")

    def discrete(self) -> Mapping[Nuclide, tuple[RadRecord, ...]]:
        """Discrete-radiation table (``ICRP-07.RAD``)"""
        return self.table("discrete")

    def beta(self) -> Mapping[Nuclide, tuple[BetRecord, ...]]:
        """Beta-spectrum table (``ICRP-07.BET``)"""
        return self.table("beta")

    def auger(self) -> Mapping[Nuclide, tuple[AckRecord, ...]]:
        """Auger / CK electron table (``ICRP-07.ACK``)"""
        return self.table("auger")

    def fission_neutron(self) -> Mapping[Nuclide, tuple[NsfRecord, ...]]:
        """Fission-neutron spectrum table (``ICRP-07.NSF``)"""
        return self.table("fission_neutron")
