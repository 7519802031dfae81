#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
One-shot, thread-safe initialise-once cell

:class:`OnceCell` holds a value that is computed at most once per
successful attempt.  It moves from *empty* to *set* exactly once; a
failing initialiser leaves it empty so a later call may try again.

Concurrency
-----------
* Reads of a set cell take no lock.
* Callers racing an empty cell elect one of them to run the initialiser.
  The others wait for that attempt and receive its value, or re-raise its
  exception.  They never start a second attempt while one is running.
* Callers arriving after a failed attempt has finished start a new one.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")

_UNSET = object()


class _Attempt:
    """State shared by the callers waiting on one initialisation attempt"""

    def __init__(self) -> None:
        self.done = threading.Event()
        self.error: BaseException | None = None


class OnceCell(Generic[T]):
    """A lazily initialised, write-once container

    Examples
    --------
    >>> cell = OnceCell()
    >>> cell.get_or_try_init(lambda: 42)
    42
    >>> cell.get_or_try_init(lambda: 0)
    42
    """

    def __init__(self) -> None:
        self._value: object = _UNSET
        self._lock = threading.Lock()
        self._attempt: _Attempt | None = None

    def is_set(self) -> bool:
        return self._value is not _UNSET

    def get(self) -> T | None:
        """Return the value, or ``None`` while the cell is empty"""
        value = self._value
        return None if value is _UNSET else value  # type: ignore[return-value]

    def get_or_try_init(self, factory: Callable[[], T]) -> T:
        """Return the value, running *factory* if the cell is empty

        Parameters
        ----------
        factory : Callable[[], T]
            Initialiser.  Called at most once per attempt, by exactly one
            thread.

        Returns
        -------
        T
            The stored value.

        Raises
        ------
        BaseException
            Whatever *factory* raised during the attempt this call joined.
            The cell stays empty.
        """
        value = self._value
        if value is not _UNSET:
            return value  # type: ignore[return-value]

        with self._lock:
            if self._value is not _UNSET:
                return self._value  # type: ignore[return-value]
            attempt = self._attempt
            leader = attempt is None
            if leader:
                attempt = self._attempt = _Attempt()

        if not leader:
            attempt.done.wait()
            if attempt.error is not None:
                raise attempt.error
            return self._value  # type: ignore[return-value]

        try:
            value = factory()
        except BaseException as exc:
            attempt.error = exc
            raise
        else:
            with self._lock:
                self._value = value
        finally:
            with self._lock:
                self._attempt = None
            attempt.done.set()
        return value  # type: ignore[return-value]
