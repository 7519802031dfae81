#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Range checks for nuclide keys

These are key-construction checks, not physical-plausibility checks on the
decay data itself: the loader publishes table values exactly as read.

Design Note
-----------
Validation functions accept plain integers, not model instances, so that
``utils`` does not depend on ``models``.  This keeps the import graph
acyclic::

    utils ← models ← readers ← dataset ← converters
"""

from __future__ import annotations

import logging

from pyicrp.exceptions import InvalidAtomicNumber, InvalidNuclide, InvalidState

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Limits
# ---------------------------------------------------------------------------

MIN_ATOMIC_NUMBER: int = 1
"""Smallest valid atomic number (hydrogen)."""

MAX_ATOMIC_NUMBER: int = 118
"""Largest valid atomic number (oganesson)."""

MAX_STATE: int = 9
"""Highest metastable-state index; the ZAI number holds the state in one digit."""


# ---------------------------------------------------------------------------
# Validation functions
# ---------------------------------------------------------------------------

def validate_atomic_number(Z: int) -> None:
    """Verify that *Z* is a valid atomic number

    Parameters
    ----------
    Z : int
        Atomic number to validate.

    Raises
    ------
    InvalidAtomicNumber
        If *Z* is outside the range [1, 118].

    Examples
    --------
    >>> validate_atomic_number(27)  # Cobalt — OK
    >>> validate_atomic_number(0)   # doctest: +ELLIPSIS
    Traceback (most recent call last):
        ...
    pyicrp.exceptions.InvalidAtomicNumber: ...
    """
    if not (MIN_ATOMIC_NUMBER <= Z <= MAX_ATOMIC_NUMBER):
        raise InvalidAtomicNumber(
            str(Z),
            f"outside [{MIN_ATOMIC_NUMBER}, {MAX_ATOMIC_NUMBER}]",
        )


def validate_mass_number(A: int, Z: int) -> None:
    """Verify that mass number *A* can belong to an element with *Z* protons

    Raises
    ------
    InvalidNuclide
        If ``A < Z``.
    """
    if A < Z:
        raise InvalidNuclide(str(A), f"mass number below atomic number {Z}")


def validate_state(state: int) -> None:
    """Verify that a metastable-state index lies in [0, 9]

    Raises
    ------
    InvalidState
        If *state* is negative or above :data:`MAX_STATE`.
    """
    if not 0 <= state <= MAX_STATE:
        raise InvalidState(str(state), f"state must be between 0 and {MAX_STATE}")
