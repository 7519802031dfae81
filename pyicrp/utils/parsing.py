#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared token-conversion helpers for the ICRP-07 table readers

All low-level numeric conversion and line splitting lives here so that the
index and spectrum readers do not duplicate format-specific logic.

ICRP-07 Text Layout
-------------------
Every table is plain ASCII with whitespace-separated fields.  Blank lines
and lines starting with ``#`` carry no data.  Floating-point values are
written in Fortran ``E`` notation (``9.9880E-01``); a ``D`` exponent marker
is accepted as well.

Unlike Python's :func:`float`, the converters here are strict: ``nan``,
``inf``, digit-group underscores and trailing characters are rejected, and
the error names the offending token.

References
----------
.. [1] ICRP Publication 107, Annex A — Description of the data files.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator

from pyicrp.exceptions import InvalidEnergy, InvalidFloat, InvalidInteger
from pyicrp.utils.constants import COMMENT_PREFIX

logger = logging.getLogger(__name__)

_FLOAT_CHARS: frozenset[str] = frozenset("0123456789+-.eEdD")
_DIGITS: frozenset[str] = frozenset("0123456789")


# ---------------------------------------------------------------------------
# Numeric conversion
# ---------------------------------------------------------------------------

def parse_float(token: str) -> float:
    """Convert a table field to a finite Python float

    Parameters
    ----------
    token : str
        A single whitespace-free field.

    Returns
    -------
    float
        The converted value.

    Raises
    ------
    InvalidFloat
        If the token is empty, contains characters outside
        ``[0-9+-.eEdD]``, is not a complete number, or overflows to an
        infinite value.

    Examples
    --------
    >>> parse_float("9.9880E-01")
    0.9988
    >>> parse_float("1.5D+02")
    150.0
    """
    t = token.strip()
    if not t or not _FLOAT_CHARS.issuperset(t):
        raise InvalidFloat(token)

    t = t.replace("D", "E").replace("d", "e")
    try:
        value = float(t)
    except ValueError as exc:
        raise InvalidFloat(token) from exc

    if not math.isfinite(value):
        raise InvalidFloat(token, "not finite")
    return value


def parse_int(token: str) -> int:
    """Convert a table field to a Python int, base 10

    Raises
    ------
    InvalidInteger
        Unless the token is an optional sign followed by ASCII digits.

    Examples
    --------
    >>> parse_int("11")
    11
    >>> parse_int("-3")
    -3
    """
    t = token.strip()
    digits = t[1:] if t[:1] in ("+", "-") else t
    if not digits or not _DIGITS.issuperset(digits):
        raise InvalidInteger(token)
    return int(t, 10)


def parse_count(token: str) -> int:
    """Convert a record-count field; counts must be non-negative

    Raises
    ------
    InvalidInteger
        If the token is not an integer or is negative.
    """
    value = parse_int(token)
    if value < 0:
        raise InvalidInteger(token, "count must be non-negative")
    return value


def parse_energy(token: str) -> float:
    """Convert an energy field (MeV); energies must be non-negative

    Raises
    ------
    InvalidFloat
        If the token is not a number.
    InvalidEnergy
        If the number is negative.
    """
    value = parse_float(token)
    if value < 0.0:
        raise InvalidEnergy(token, "energy must be non-negative")
    return value


# ---------------------------------------------------------------------------
# Line iteration
# ---------------------------------------------------------------------------

def iter_records(text: str) -> Iterator[tuple[int, list[str], str]]:
    """Yield the data lines of a table file

    Parameters
    ----------
    text : str
        Complete file content.

    Yields
    ------
    tuple[int, list[str], str]
        ``(line_number, tokens, raw_line)`` for every non-blank,
        non-comment line.  Line numbers are 1-based physical lines.

    Examples
    --------
    >>> list(iter_records("# header\\n\\nCo-60 5.27y 1\\n"))
    [(3, ['Co-60', '5.27y', '1'], 'Co-60 5.27y 1')]
    """
    for line_number, raw in enumerate(text.splitlines(), start=1):
        stripped = raw.strip()
        if not stripped or stripped.startswith(COMMENT_PREFIX):
            continue
        yield line_number, stripped.split(), raw.rstrip()
