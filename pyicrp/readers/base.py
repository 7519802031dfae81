#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Abstract base class for all ICRP-07 table readers

Every concrete reader (NDX, RAD, BET, ACK, NSF) inherits from
:class:`BaseReader` and implements :meth:`read`, which returns an
immutable table keyed by :class:`~pyicrp.models.nuclide.Nuclide`.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pyicrp.exceptions import DatasetIOError
from pyicrp.models.nuclide import Nuclide

logger = logging.getLogger(__name__)

Table = Mapping[Nuclide, Any]
"""Type alias for a table returned by a reader."""

TEXT_ENCODING: str = "latin-1"
"""Encoding used to decode table files; every byte maps to a character."""


class BaseReader(ABC):
    """Abstract base for ICRP-07 table readers

    Subclasses override :meth:`read` to load one table file, delegate
    record parsing to a pure record parser and fold the records into a
    mapping.

    Policy
    ------
    Reading is fail-fast: the first malformed record aborts the build and
    no partial table is returned.  The parser's exception propagates with
    its type unchanged, located at the offending file and line.

    Notes
    -----
    Readers never cache; caching belongs to the dataset layer.  The
    dependency direction is::

        utils ← models ← readers ← dataset ← converters
    """

    @abstractmethod
    def read(self, path: Path | str) -> Table:
        """Parse an ICRP-07 table file and return an immutable table

        Parameters
        ----------
        path : Path | str
            Filesystem path to the table file.

        Returns
        -------
        Mapping[Nuclide, ...]
            A read-only mapping in file order.

        Raises
        ------
        DatasetIOError
            If the file cannot be read.
        ParseError
            If a record is malformed (a specific subclass).
        InvalidNuclide
            If a nuclide field is malformed.
        """
        ...

    @staticmethod
    def _read_text(path: Path) -> str:
        """Read a whole table file, wrapping OS errors in :class:`DatasetIOError`"""
        logger.debug("Opening table file: %s", path)
        try:
            return path.read_text(encoding=TEXT_ENCODING)
        except OSError as exc:
            raise DatasetIOError(path, exc) from exc
