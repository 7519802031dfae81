#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Nuclide identity, decay modes and progeny

:class:`Nuclide` is the key of every table.  Its equality and hash are
defined on ``(atomic_number, mass_number, state)`` only, so all accepted
spellings of a nuclide map to the same key::

    Nuclide.from_str("Tc-99m") == Nuclide.from_str("tc99M") == Nuclide(43, 99, 1)

Naming
------
The canonical ICRP-07 spelling is ``<Symbol>-<A>[<state>]`` where the state
suffix is empty for the ground state, ``m`` for the first metastable
level, ``n`` for the second and ``m<k>`` beyond that.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pyicrp.exceptions import InvalidDecayMode, InvalidNuclide, InvalidState, InvalidSymbol
from pyicrp.utils.constants import ELEMENT_SYMBOLS, SYMBOL_TO_Z
from pyicrp.utils.validation import (
    validate_atomic_number,
    validate_mass_number,
    validate_state,
)

_STATE_SUFFIXES: dict[str, int] = {"": 0, "m": 1, "n": 2}


def _parse_state(suffix: str, text: str) -> int:
    s = suffix.lower()
    if s in _STATE_SUFFIXES:
        return _STATE_SUFFIXES[s]
    if len(s) > 1 and s[0] == "m" and s[1:].isascii() and s[1:].isdigit():
        return int(s[1:])
    raise InvalidState(text)


def _state_suffix(state: int) -> str:
    if state == 0:
        return ""
    if state == 1:
        return "m"
    if state == 2:
        return "n"
    return f"m{state}"


@dataclass(frozen=True, order=True)
class Nuclide:
    """A specific isotope and energy state of a chemical element

    Parameters
    ----------
    atomic_number : int
        Proton number Z, 1 ≤ Z ≤ 118.
    mass_number : int
        Nucleon number A, A ≥ Z.
    state : int, optional
        0 for the ground state, 1 ≤ k ≤ 9 for the k-th metastable level.

    Raises
    ------
    InvalidAtomicNumber
        If Z is out of range.
    InvalidNuclide
        If A < Z.
    InvalidState
        If *state* is outside [0, 9].

    Examples
    --------
    >>> n = Nuclide.from_str("co-60")
    >>> str(n), n.zai
    ('Co-60', 270600)
    """

    atomic_number: int
    mass_number: int
    state: int = 0

    def __post_init__(self) -> None:
        validate_atomic_number(self.atomic_number)
        validate_mass_number(self.mass_number, self.atomic_number)
        validate_state(self.state)

    @classmethod
    def from_str(cls, text: str) -> Nuclide:
        """Parse ``<symbol>[-]<mass>[<state>]``, case-insensitively

        Raises
        ------
        InvalidSymbol
            If the element symbol is unknown.
        InvalidState
            If the state suffix is not ``m``, ``n`` or ``m<k>``.
        InvalidNuclide
            If the text is otherwise malformed.
        """
        s = text.strip()
        pos = 0
        while pos < len(s) and s[pos].isascii() and s[pos].isalpha():
            pos += 1
        letters = s[:pos]
        if not letters:
            raise InvalidNuclide(text)

        if pos < len(s) and s[pos] == "-":
            pos += 1

        start = pos
        while pos < len(s) and "0" <= s[pos] <= "9":
            pos += 1
        if pos == start:
            raise InvalidNuclide(text)

        symbol = letters.capitalize()
        if symbol not in SYMBOL_TO_Z:
            raise InvalidSymbol(text)

        return cls(SYMBOL_TO_Z[symbol], int(s[start:pos]), _parse_state(s[pos:], text))

    @classmethod
    def from_zai(cls, zai: int) -> Nuclide:
        """Build a nuclide from its ZAI number ``Z·10000 + A·10 + state``"""
        return cls(zai // 10000, (zai // 10) % 1000, zai % 10)

    @classmethod
    def coerce(cls, nuclide: Nuclide | str) -> Nuclide:
        """Return *nuclide* unchanged, or parse it if given as text"""
        if isinstance(nuclide, Nuclide):
            return nuclide
        return cls.from_str(nuclide)

    @property
    def symbol(self) -> str:
        """Element symbol, e.g. ``"Co"``"""
        return ELEMENT_SYMBOLS[self.atomic_number]

    @property
    def zai(self) -> int:
        """ZAI identifier ``Z·10000 + A·10 + state``"""
        return self.atomic_number * 10000 + self.mass_number * 10 + self.state

    @property
    def is_metastable(self) -> bool:
        return self.state > 0

    def __str__(self) -> str:
        return f"{self.symbol}-{self.mass_number}{_state_suffix(self.state)}"


class DecayMode(Enum):
    """Radioactive decay mode, valued by its ICRP-07 code"""

    ALPHA = "A"
    BETA_MINUS = "B-"
    BETA_PLUS = "B+"
    ELECTRON_CAPTURE = "EC"
    ISOMERIC_TRANSITION = "IT"
    SPONTANEOUS_FISSION = "SF"

    @classmethod
    def from_code(cls, code: str) -> DecayMode:
        """Look up a single decay-mode code

        Raises
        ------
        InvalidDecayMode
            If *code* is not one of ``A B- B+ EC IT SF``.
        """
        try:
            return cls(code)
        except ValueError:
            raise InvalidDecayMode(code) from None

    @classmethod
    def split(cls, text: str) -> tuple[DecayMode, ...]:
        """Tokenize a concatenated decay-mode field

        ICRP-07 lists all modes of a nuclide in one field without
        separators.  Codes are matched longest first.

        Raises
        ------
        InvalidDecayMode
            If *text* is empty or any part of it is not a known code.

        Examples
        --------
        >>> DecayMode.split("ECB+")
        (<DecayMode.ELECTRON_CAPTURE: 'EC'>, <DecayMode.BETA_PLUS: 'B+'>)
        """
        modes: list[DecayMode] = []
        pos = 0
        while pos < len(text):
            for width in (2, 1):
                code = text[pos:pos + width]
                if len(code) == width and code in _DECAY_CODES:
                    modes.append(cls(code))
                    pos += width
                    break
            else:
                raise InvalidDecayMode(text)
        if not modes:
            raise InvalidDecayMode(text)
        return tuple(modes)

    def __str__(self) -> str:
        return self.value


_DECAY_CODES: frozenset[str] = frozenset(mode.value for mode in DecayMode)


@dataclass(frozen=True)
class Progeny:
    """A decay product of a parent nuclide

    Parameters
    ----------
    nuclide : Nuclide
        The daughter nuclide.
    decay_mode : DecayMode
        Mode through which the parent feeds this daughter.
    branching_fraction : float
        Fraction of parent decays producing this daughter.  Not checked
        against the other branches.
    """

    nuclide: Nuclide
    decay_mode: DecayMode
    branching_fraction: float
