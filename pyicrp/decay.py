#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Decay-data capability interface

Decay-chain builders and dose calculators depend only on :class:`DecayData`,
never on table internals or file formats.  Two implementations ship with
the package:

* :class:`~pyicrp.dataset.icrp107.ICRP107Dataset` — file-backed, lazily
  loads ``ICRP-07.NDX`` on first use.
* :class:`InMemoryDecayData` — serves a fixed set of
  :class:`~pyicrp.models.records.NuclideAttribute` records, for tests and
  for callers that assemble their own tables.

Nuclide arguments may be :class:`~pyicrp.models.nuclide.Nuclide` instances
or any spelling accepted by :meth:`Nuclide.from_str`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from pyicrp.exceptions import InvalidNuclide
from pyicrp.models.half_life import HalfLife
from pyicrp.models.nuclide import Nuclide, Progeny
from pyicrp.models.records import NuclideAttribute


class DecayData(ABC):
    """Read-only decay properties of nuclides

    Every lookup raises :class:`~pyicrp.exceptions.InvalidNuclide` when the
    nuclide is unknown to the implementation.
    """

    @abstractmethod
    def check_nuclide(self, nuclide: Nuclide | str) -> None:
        """Return ``None`` if *nuclide* is known, raise ``InvalidNuclide`` otherwise"""

    @abstractmethod
    def progeny(self, nuclide: Nuclide | str) -> tuple[Progeny, ...]:
        """Decay products of *nuclide*, in tabulated order"""

    @abstractmethod
    def half_life(self, nuclide: Nuclide | str) -> HalfLife:
        """Physical half-life of *nuclide*"""

    def decay_constant(self, nuclide: Nuclide | str) -> float:
        """Decay constant λ = ln 2 / T½ of *nuclide* (s⁻¹)"""
        return self.half_life(nuclide).as_lambda()


class IndexedDecayData(DecayData):
    """:class:`DecayData` served from an index table

    Subclasses provide :meth:`index`; every lookup goes through it, so a
    lazily loaded index is loaded by the first lookup.
    """

    @abstractmethod
    def index(self) -> Mapping[Nuclide, NuclideAttribute]:
        """The index table"""

    def attribute(self, nuclide: Nuclide | str) -> NuclideAttribute:
        """Full index record of *nuclide*

        Raises
        ------
        InvalidNuclide
            If *nuclide* is malformed or absent from the index.
        """
        key = Nuclide.coerce(nuclide)
        try:
            return self.index()[key]
        except KeyError:
            raise InvalidNuclide(str(key), "not in index") from None

    def check_nuclide(self, nuclide: Nuclide | str) -> None:
        self.attribute(nuclide)

    def progeny(self, nuclide: Nuclide | str) -> tuple[Progeny, ...]:
        return self.attribute(nuclide).progeny

    def half_life(self, nuclide: Nuclide | str) -> HalfLife:
        return self.attribute(nuclide).half_life

    def __contains__(self, nuclide: object) -> bool:
        if not isinstance(nuclide, (Nuclide, str)):
            return False
        try:
            self.check_nuclide(nuclide)
        except InvalidNuclide:
            return False
        return True


class InMemoryDecayData(IndexedDecayData):
    """Decay data served from records held in memory

    Parameters
    ----------
    attributes : Iterable[NuclideAttribute] | Mapping[Nuclide, NuclideAttribute]
        Index records.  When an iterable is given, each record is keyed by
        its own ``nuclide``; later records replace earlier ones.

    Examples
    --------
    >>> from pyicrp.models import HalfLife, NuclideAttribute, Nuclide
    >>> co60 = Nuclide.from_str("Co-60")
    >>> data = InMemoryDecayData([
    ...     NuclideAttribute(co60, HalfLife.from_str("5.27y"), (), 0.0, 0.0, 0.0)])
    >>> data.half_life("Co-60")
    HalfLife(value=5.27, unit=<TimeUnit.YEAR: 'y'>)
    """

    def __init__(
        self,
        attributes: Iterable[NuclideAttribute] | Mapping[Nuclide, NuclideAttribute],
    ) -> None:
        if isinstance(attributes, Mapping):
            table = dict(attributes)
        else:
            table = {attr.nuclide: attr for attr in attributes}
        self._index = MappingProxyType(table)

    def index(self) -> Mapping[Nuclide, NuclideAttribute]:
        return self._index
