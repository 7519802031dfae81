#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Half-life value type

A :class:`HalfLife` is a positive number paired with one of seven time
units.  ICRP-07 tables write it compactly as ``<number><unit>``, e.g.
``5.2713y`` or ``6.015h``; whitespace between number and unit is allowed
when parsing.

Grammar
-------
::

    half_life := number ws* unit
    number    := digit+ ( "." digit* )? ( ("e" | "E") ("+" | "-")? digit+ )?
    unit      := "us" | "μs" | "µs" | "ms" | "s" | "m" | "h" | "d" | "y"

The unit must consume the rest of the text.  ``m`` is minutes.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from pyicrp.exceptions import InvalidHalfLife
from pyicrp.utils.constants import SECONDS_PER_UNIT

_MICRO_ALIASES: tuple[str, ...] = ("μs", "µs")


class TimeUnit(Enum):
    """Half-life time unit, valued by its ICRP-07 code"""

    MICROSECOND = "us"
    MILLISECOND = "ms"
    SECOND = "s"
    MINUTE = "m"
    HOUR = "h"
    DAY = "d"
    YEAR = "y"

    @classmethod
    def from_code(cls, code: str) -> TimeUnit:
        """Look up a unit by code; ``μs`` is accepted for microseconds

        Raises
        ------
        InvalidHalfLife
            If *code* is not a recognised unit.
        """
        if code in _MICRO_ALIASES:
            return cls.MICROSECOND
        try:
            return cls(code)
        except ValueError:
            raise InvalidHalfLife(code, "unknown time unit") from None

    @property
    def seconds(self) -> float:
        """Length of one unit in seconds"""
        return SECONDS_PER_UNIT[self.value]

    @property
    def symbol(self) -> str:
        """Display symbol (``μs`` for microseconds, otherwise the code)"""
        return "μs" if self is TimeUnit.MICROSECOND else self.value

    def __str__(self) -> str:
        return self.symbol


def _scan_digits(text: str, pos: int) -> int:
    end = pos
    while end < len(text) and "0" <= text[end] <= "9":
        end += 1
    return end


def _scan_number(text: str) -> int:
    """Return the end index of the leading number in *text*, or 0 if none"""
    end = _scan_digits(text, 0)
    if end == 0:
        return 0

    if end < len(text) and text[end] == ".":
        end = _scan_digits(text, end + 1)

    if end < len(text) and text[end] in "eE":
        exp = end + 1
        if exp < len(text) and text[exp] in "+-":
            exp += 1
        exp_end = _scan_digits(text, exp)
        if exp_end > exp:
            end = exp_end
    return end


@dataclass(frozen=True)
class HalfLife:
    """Physical half-life of a nuclide

    Parameters
    ----------
    value : float
        Magnitude in *unit*.  Must be finite and strictly positive.
    unit : TimeUnit
        Time unit of *value*.

    Raises
    ------
    InvalidHalfLife
        If *value* is not finite or not positive, or if its length in
        seconds underflows to zero or gives an infinite decay constant.

    Examples
    --------
    >>> t = HalfLife.from_str("5.27y")
    >>> round(t.as_seconds() / 1e8, 3)
    1.663
    >>> str(HalfLife.from_str("1.1 s"))
    '1.1 s'
    """

    value: float
    unit: TimeUnit

    def __post_init__(self) -> None:
        value = float(self.value)
        if not math.isfinite(value) or value <= 0.0:
            raise InvalidHalfLife(repr(self.value), "half-life must be finite and positive")
        seconds = value * self.unit.seconds
        if not (0.0 < seconds < math.inf) or not math.isfinite(math.log(2.0) / seconds):
            raise InvalidHalfLife(
                repr(self.value), f"{value!r} {self.unit.value} is not representable in seconds"
            )
        object.__setattr__(self, "value", value)

    @classmethod
    def from_str(cls, text: str) -> HalfLife:
        """Parse ``<number><unit>`` with optional whitespace in between

        Raises
        ------
        InvalidHalfLife
            On any text that does not match the grammar exactly, or whose
            value is rejected by the constructor.  The error carries *text*.
        """
        s = text.strip()
        end = _scan_number(s)
        if end == 0:
            raise InvalidHalfLife(text)

        code = s[end:].lstrip()
        try:
            unit = TimeUnit.from_code(code)
            return cls(float(s[:end]), unit)
        except InvalidHalfLife:
            raise InvalidHalfLife(text) from None

    def as_seconds(self) -> float:
        """Half-life in seconds"""
        return self.value * self.unit.seconds

    def as_lambda(self) -> float:
        """Decay constant λ = ln 2 / T½ (s⁻¹)"""
        return math.log(2.0) / self.as_seconds()

    def __str__(self) -> str:
        return f"{self.value:.12g} {self.unit.symbol}"
