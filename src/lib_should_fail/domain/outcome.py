"""Captured outcome of running a unit of work once.

Purpose
-------
Represent "the callable returned" and "the callable raised" as two tiny value
objects so the evaluator can branch on them without re-running anything.

Contents
--------
* :class:`Success` – the unit of work returned normally.
* :class:`Failure` – the unit of work raised ``error``.
* :data:`Outcome` – union alias used in signatures.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class Success:
    """The unit of work returned without raising."""

    @property
    def failed(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Failure:
    """The unit of work raised :attr:`error` (after wrapper unwrapping).

    :attr:`boundary` is the exception the caller was already handling when the
    unit of work ran, or ``None``. Cause walks stop at it.
    """

    error: BaseException
    boundary: BaseException | None = None

    @property
    def failed(self) -> bool:
        return True


Outcome = Union[Success, Failure]


__all__ = ["Success", "Failure", "Outcome"]
