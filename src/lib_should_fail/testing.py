"""Testing diagnostics that keep failure scenarios observable and predictable.

Purpose
    Provide intentionally failing helpers that exercise the expectation helpers
    and the CLI error paths without relying on brittle fixtures.

Contents
    - ``FAILURE_MESSAGE``: stable message used when forcing a failure.
    - ``i_should_fail``: raises ``RuntimeError`` so callers can assert on the
      propagated error details.
    - ``i_should_fail_with_cause``: raises a ``RuntimeError`` whose explicit
      cause chain ends in a ``LookupError``.

System Integration
    Used by the ``fail`` CLI command, the documentation examples, and the test
    suite when a realistic nested failure is needed.
"""

from __future__ import annotations

from typing import Final

FAILURE_MESSAGE: Final[str] = "i should fail"
"""Stable message emitted when ``i_should_fail`` triggers a failure sequence."""

ROOT_CAUSE_MESSAGE: Final[str] = "root cause"


def i_should_fail() -> None:
    """Raise a deterministic :class:`RuntimeError` for failure-path testing.

    Examples
    --------
    >>> i_should_fail()
    Traceback (most recent call last):
    ...
    RuntimeError: i should fail
    """

    raise RuntimeError(FAILURE_MESSAGE)


def i_should_fail_with_cause(depth: int = 2) -> None:
    """Raise a :class:`RuntimeError` sitting *depth* causes above a ``LookupError``.

    Intermediate links are :class:`ValueError` instances named after their
    level so :func:`lib_should_fail.core.describe_chain` output stays readable.

    Examples
    --------
    >>> from lib_should_fail.application.chain import walk_chain
    >>> try:
    ...     i_should_fail_with_cause(depth=3)
    ... except RuntimeError as exc:
    ...     [type(link).__name__ for link in walk_chain(exc)]
    ['RuntimeError', 'ValueError', 'ValueError', 'LookupError']
    """

    if depth < 1:
        raise ValueError("depth must be at least 1")
    error: BaseException = LookupError(ROOT_CAUSE_MESSAGE)
    for level in range(depth - 1, 0, -1):
        wrapper = ValueError(f"level {level}")
        wrapper.__cause__ = error
        error = wrapper
    raise RuntimeError(FAILURE_MESSAGE) from error


__all__ = ["FAILURE_MESSAGE", "ROOT_CAUSE_MESSAGE", "i_should_fail", "i_should_fail_with_cause"]
