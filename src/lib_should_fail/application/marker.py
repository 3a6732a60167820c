"""Mark tests as "not yet implemented".

Purpose
-------
Let a test document behaviour that does not work yet. The test keeps passing
while the behaviour is broken and starts failing the moment it works, so the
marker cannot be forgotten.

Contents
--------
* :data:`ARMED` – context-scoped re-entrancy flag.
* :func:`not_yet_implemented` – re-run the calling test method once.
* :func:`not_yet_implemented_test` – decorator form that needs no stack scan.

Usage
-----
::

    class ParserTest(unittest.TestCase):
        def test_unicode_identifiers(self):
            if not_yet_implemented(self):
                return
            ...  # the real, currently failing assertions

The outer call re-runs ``test_unicode_identifiers``. Inside that second run
the marker is armed and returns ``False``, so the real assertions execute. If
they raise, the outer call returns ``True`` and the test ends early; if they
pass, the outer call fails the test.
"""

from __future__ import annotations

import functools
from contextvars import ContextVar
from typing import Callable, TypeVar

from ..observability import log_error, log_info, make_event
from .expectations import fail
from .locator import locate_test_method, resolve_test_method
from .ports import FrameProvider, TestMethodPredicate

F = TypeVar("F", bound=Callable[..., object])

ARMED: ContextVar[bool] = ContextVar("lib_should_fail_not_yet_implemented", default=False)
"""``True`` while a not-yet-implemented re-run is in flight in this context.

Each thread starts with its own context, so markers on different threads do
not see each other.
"""


def not_yet_implemented(
    owner: object,
    *,
    frames: FrameProvider,
    is_test: TestMethodPredicate,
    method: str | Callable[..., object] | None = None,
) -> bool:
    """Re-run the calling test method of *owner* and expect it to fail.

    Parameters
    ----------
    owner:
        The test case instance (usually ``self``).
    frames / is_test:
        Collaborators used to find the running test method.
    method:
        Explicit test method (name or function). Skips the stack scan.

    Returns
    -------
    bool
        ``True`` when the re-run failed, ``False`` when called while already
        armed in this context.

    Raises
    ------
    ExpectationNotMet
        The re-run passed.
    TestMethodNotFound
        No running test method could be found.
    """

    if ARMED.get():
        return False
    token = ARMED.set(True)
    try:
        if method is None:
            test_method = locate_test_method(owner, frames=frames, is_test=is_test)
        else:
            test_method = resolve_test_method(owner, method)
        return _expect_rerun_failure(test_method.name, test_method.bind(owner))
    finally:
        ARMED.reset(token)


def not_yet_implemented_test(function: F) -> F:
    """Decorate a test that is expected to fail until its feature lands.

    The decorated test runs once with the marker armed. A failure, including
    ``pytest.fail`` and other non-``Exception`` errors apart from
    ``KeyboardInterrupt``, is swallowed and logged; a pass fails the test.

    Examples
    --------
    >>> @not_yet_implemented_test
    ... def test_roman_numerals():
    ...     assert int("XII") == 12
    >>> test_roman_numerals()
    """

    @functools.wraps(function)
    def wrapper(*args: object, **kwargs: object) -> None:
        token = ARMED.set(True)
        try:
            _expect_rerun_failure(function.__name__, lambda: function(*args, **kwargs))
        finally:
            ARMED.reset(token)

    return wrapper  # type: ignore[return-value]


def _expect_rerun_failure(name: str, run: Callable[[], object]) -> bool:
    log_info("not_yet_implemented_running", **make_event("not_yet_implemented", name))
    try:
        run()
    except KeyboardInterrupt:
        raise
    except BaseException as exc:  # noqa: BLE001 - pytest.fail and SystemExit are failures too
        log_info(
            "not_yet_implemented_confirmed",
            **make_event("not_yet_implemented", name, {"error": type(exc).__name__}),
        )
        return True
    log_error("not_yet_implemented_passed", **make_event("not_yet_implemented", name))
    fail(f"{name} is marked as not yet implemented but passes unexpectedly")


__all__ = ["ARMED", "not_yet_implemented", "not_yet_implemented_test"]
