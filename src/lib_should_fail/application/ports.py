"""Application-layer ports describing collaborator responsibilities.

Purpose
-------
Define the structural contracts the expectation helpers consume so the
composition root can wire defaults while tests inject fakes.

Contents
--------
* :class:`ScriptEngine` – evaluates Python source under a given script name.
* :class:`NameGenerator` – hands out unique script names.
* :class:`FrameProvider` – yields the current call frames, innermost first.
* :data:`TestMethodPredicate` – decides whether a function is a test entry point.

System Role
-----------
These protocols keep :mod:`lib_should_fail.application` free from
``inspect``/``exec`` details. Each adapter implements one protocol.
"""

from __future__ import annotations

from types import FrameType
from typing import Callable, Protocol, Sequence, runtime_checkable


@runtime_checkable
class ScriptEngine(Protocol):
    """Evaluate a snippet of source code.

    Implementations raise whatever the script raises (optionally wrapped in
    :class:`~lib_should_fail.domain.errors.ScriptExecutionError`) and return
    ``None`` otherwise.
    """

    def evaluate(self, source: str, script_name: str) -> None:
        """Run *source* labelled as *script_name*."""


@runtime_checkable
class NameGenerator(Protocol):
    """Produce a label that is unique within the process."""

    def next_name(self) -> str:
        """Return the next unused script name."""


@runtime_checkable
class FrameProvider(Protocol):
    """Expose the active call stack.

    Why
    ----
    Stack inspection is swapped for a fixed frame list in tests.
    """

    def frames(self) -> Sequence[FrameType]:
        """Return frames ordered innermost (current) to outermost."""


TestMethodPredicate = Callable[[Callable[..., object]], bool]
"""Return ``True`` when the given function is a recognised test entry point."""
