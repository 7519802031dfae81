#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Custom exception hierarchy for the PyICRP package

All exceptions raised by PyICRP inherit from :class:`PyICRPError`, making it
possible to catch every library-specific error with a single ``except`` clause
while still allowing fine-grained handling when needed.

Exception Hierarchy
-------------------
::

    PyICRPError
    ├── InvalidNuclide          # Unknown or malformed nuclide key
    │   ├── InvalidAtomicNumber
    │   ├── InvalidSymbol
    │   └── InvalidState
    ├── ParseError              # Malformed table content
    │   ├── InvalidHalfLife
    │   ├── InvalidDecayMode
    │   ├── InvalidRadiationType
    │   ├── InvalidFloat
    │   ├── InvalidInteger
    │   ├── InvalidEnergy
    │   └── MalformedRecord
    ├── InvalidFilePath         # Dataset root is not a directory
    ├── DatasetIOError          # Table file missing or unreadable
    └── ConversionError         # HDF5 write failures

Location
--------
Parsers know only the token they failed on.  Table readers attach the file
path and line number with :meth:`PyICRPError.locate` before re-raising, so
the exception type seen by the caller is always the one the parser raised.
"""

from __future__ import annotations

from pathlib import Path


class PyICRPError(Exception):
    """Base exception for all PyICRP errors

    Parameters
    ----------
    message : str
        Human-readable description of the failure.
    token : str | None, optional
        The offending raw text, when the error concerns a single token
        or record.

    Attributes
    ----------
    token : str | None
        Offending raw text.
    path : pathlib.Path | None
        Table file the error was found in, set by the readers.
    line_number : int | None
        1-based line number inside *path*.
    """

    def __init__(self, message: str = "", *, token: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.token = token
        self.path: Path | None = None
        self.line_number: int | None = None

    def locate(self, path: Path | str, line_number: int) -> PyICRPError:
        """Record where in a table file the error occurred

        The first location wins; re-locating an already located error is
        a no-op.  Returns ``self`` so the call can be chained.
        """
        if self.path is None:
            self.path = Path(path)
            self.line_number = line_number
        return self

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"{self.message} [{self.path.name}, line {self.line_number}]"


class _TokenError(PyICRPError):
    """Error about a single offending token, rendered as ``<label>: 'token'``"""

    label = "invalid token"

    def __init__(self, token: str, detail: str | None = None) -> None:
        message = f"{self.label}: {token!r}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message, token=token)


class InvalidNuclide(_TokenError):
    """Raised for a malformed nuclide name or a nuclide absent from the index

    Lookups through the decay-data interface raise this exact type when the
    key is not in the index table.
    """

    label = "invalid nuclide"


class InvalidAtomicNumber(InvalidNuclide):
    """Raised when an atomic number falls outside 1 ≤ Z ≤ 118"""

    label = "invalid atomic number"


class InvalidSymbol(InvalidNuclide):
    """Raised when an element symbol is not in the periodic table"""

    label = "invalid symbol"


class InvalidState(InvalidNuclide):
    """Raised for an unrecognised metastable-state suffix"""

    label = "invalid state"


class ParseError(_TokenError):
    """Raised when a table file contains malformed or unparseable content

    Subclasses name the field that failed.  A bare ``ParseError`` is never
    raised by the readers.
    """

    label = "parse error"


class InvalidHalfLife(ParseError):
    """Raised when a half-life is not ``<number><unit>`` or out of range"""

    label = "invalid half life"


class InvalidDecayMode(ParseError):
    """Raised for a decay-mode code outside A, B-, B+, EC, IT, SF"""

    label = "invalid decay mode"


class InvalidRadiationType(ParseError):
    """Raised for an unknown radiation code or mnemonic, or a mismatched pair"""

    label = "invalid radiation type"


class InvalidFloat(ParseError):
    """Raised when a numeric field is not a finite decimal number"""

    label = "invalid float number"


class InvalidInteger(ParseError):
    """Raised when an integer field is not an optionally signed decimal"""

    label = "invalid integer"


class InvalidEnergy(ParseError):
    """Raised when an energy field parses but is negative"""

    label = "invalid energy"


class MalformedRecord(ParseError):
    """Raised for a record with the wrong number of fields

    Also covers spectrum blocks truncated before their declared record
    count and duplicate index records.  ``token`` holds the raw line.
    """

    label = "malformed record"


class InvalidFilePath(PyICRPError):
    """Raised when a dataset root does not exist or is not a directory"""

    def __init__(self, path: Path | str) -> None:
        super().__init__(f"invalid file path: {str(path)!r}", token=str(path))


class DatasetIOError(PyICRPError):
    """Raised when a table file cannot be read

    The underlying :class:`OSError` is available as ``__cause__`` and as
    :attr:`os_error`.
    """

    def __init__(self, path: Path | str, os_error: OSError) -> None:
        super().__init__(f"cannot read {str(path)!r}: {os_error.strerror or os_error}")
        self.path = Path(path)
        self.os_error = os_error

    def __str__(self) -> str:
        return self.message


class ConversionError(PyICRPError):
    """Raised when HDF5 export fails

    This covers an existing output file when overwriting is not allowed,
    and any error raised by h5py while writing.
    """
