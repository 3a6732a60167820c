"""Run a unit of work once and record how it ended.

Contents
    - ``capture``: invoke a zero-argument callable and return an outcome.
    - ``unwrap``: peel one :class:`ScriptExecutionError` layer off an error.
"""

from __future__ import annotations

import sys
from typing import Callable

from ..domain.errors import ScriptExecutionError
from ..domain.outcome import Failure, Outcome, Success


def unwrap(error: BaseException) -> BaseException:
    """Return the real error carried by a script wrapper, or *error* itself.

    Examples
    --------
    >>> original = KeyError("missing")
    >>> unwrap(ScriptExecutionError("TestScript0.py", original)) is original
    True
    >>> plain = ValueError("x")
    >>> unwrap(plain) is plain
    True
    """

    if isinstance(error, ScriptExecutionError) and error.original is not None:
        return error.original
    return error


def capture(work: Callable[[], object]) -> Outcome:
    """Invoke *work* exactly once and describe the result.

    Any :class:`BaseException` is captured so ``SystemExit`` and assertion
    failures can be expected too; ``KeyboardInterrupt`` always propagates. The
    exception the caller is handling at the time, if any, is kept as the
    failure's boundary so it is never mistaken for a cause.

    Examples
    --------
    >>> capture(lambda: None)
    Success()
    >>> capture(lambda: int("x")).error.__class__.__name__
    'ValueError'
    """

    handling = sys.exc_info()[1]
    try:
        work()
    except KeyboardInterrupt:
        raise
    except BaseException as exc:  # noqa: BLE001 - every other error is the observation
        return Failure(unwrap(exc), handling)
    return Success()


__all__ = ["capture", "unwrap"]
