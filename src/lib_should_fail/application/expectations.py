"""Expectation helpers asserting that code fails.

Purpose
-------
Implement the assertion shapes offered to test authors on top of
:func:`~lib_should_fail.application.capture.capture` and the chain walker.
Every helper runs its unit of work exactly once, returns the interesting
exception on success, and reports through :func:`fail` otherwise.

Contents
--------
* :func:`fail` – the single reporting primitive; never returns.
* :func:`should_fail` – the callable must raise.
* :func:`should_fail_with` – the callable must raise an instance of a type.
* :func:`should_fail_with_cause` – an instance of a type must appear among
  the causes of what the callable raised.
* :func:`should_fail_script` / :func:`assert_script` – the same for source
  text evaluated through a :class:`~lib_should_fail.application.ports.ScriptEngine`.

System Role
-----------
Pure orchestration. Collaborators (script engine, name generator) arrive as
arguments; :mod:`lib_should_fail.core` supplies the defaults.
"""

from __future__ import annotations

from typing import Callable, NoReturn

from ..domain.errors import ExpectationNotMet
from ..domain.outcome import Failure
from ..observability import log_debug, make_event
from .capture import capture
from .chain import cause_of, describe_chain, describe_error, find_cause_of_kind, kind_name
from .ports import NameGenerator, ScriptEngine


def fail(message: str | None = None) -> NoReturn:
    """Abort the current test with *message*.

    Examples
    --------
    >>> fail("boom")
    Traceback (most recent call last):
    ...
    lib_should_fail.domain.errors.ExpectationNotMet: boom
    """

    if message is None:
        raise ExpectationNotMet()
    raise ExpectationNotMet(message)


def work_label(work: Callable[[], object]) -> str:
    """Return the display label used for *work* in failure messages."""

    return getattr(work, "__qualname__", None) or repr(work)


def should_fail(work: Callable[[], object]) -> BaseException:
    """Assert that *work* raises and return what it raised.

    Examples
    --------
    >>> should_fail(lambda: 1 / 0)
    ZeroDivisionError('division by zero')
    """

    return _expect_failure(work, f"Callable {work_label(work)}")


def should_fail_with(kind: type[BaseException], work: Callable[[], object]) -> BaseException:
    """Assert that *work* raises an instance of *kind* and return it.

    Examples
    --------
    >>> should_fail_with(LookupError, lambda: {}["missing"])
    KeyError('missing')
    """

    if kind is None:
        fail("The expected exception type cannot be None")
    return _expect_failure_with(kind, work, f"Callable {work_label(work)}")


def should_fail_with_cause(kind: type[BaseException], work: Callable[[], object]) -> BaseException:
    """Assert that an instance of *kind* caused the failure of *work*.

    Only the causes are searched, never the raised exception itself. A raised
    exception without any cause is reported separately because it usually
    means :func:`should_fail_with` was the intended helper.

    Returns
    -------
    BaseException
        The matching cause.
    """

    if kind is None:
        fail("The expected cause type cannot be None")
    subject = f"Callable {work_label(work)}"
    expected = kind_name(kind)
    outcome = capture(work)
    if not isinstance(outcome, Failure):
        _report(
            "should_fail_with_cause",
            subject,
            f"{subject} should have failed with an exception having a nested cause of type {expected}",
        )
    error = outcome.error
    boundary = outcome.boundary
    if cause_of(error, boundary) is None:
        _report(
            "should_fail_with_cause",
            subject,
            f"{subject} was expected to fail due to a nested cause of type {expected}"
            f" but instead got a direct exception of type {kind_name(type(error))}"
            " with no nested cause(s). Code under test has a bug or perhaps you meant should_fail?",
        )
    cause = find_cause_of_kind(error, kind, boundary=boundary)
    if cause is None:
        _report(
            "should_fail_with_cause",
            subject,
            f"{subject} should have failed with an exception having a nested cause of type {expected}"
            f", instead found these exceptions:\n{describe_chain(error, boundary=boundary)}",
        )
    log_debug("expectation_met", **make_event("should_fail_with_cause", subject, {"kind": expected}))
    return cause


def should_fail_script(
    source: str,
    kind: type[BaseException] | None = None,
    *,
    engine: ScriptEngine,
    names: NameGenerator,
) -> BaseException:
    """Assert that evaluating *source* raises (an instance of *kind*, if given).

    Each call evaluates under a fresh name from *names*.
    """

    def work() -> None:
        engine.evaluate(source, names.next_name())

    if kind is None:
        return _expect_failure(work, "Script")
    return _expect_failure_with(kind, work, "Script")


def assert_script(source: str, *, engine: ScriptEngine, names: NameGenerator) -> None:
    """Evaluate *source* and let any error propagate untouched."""

    engine.evaluate(source, names.next_name())


def _expect_failure(work: Callable[[], object], subject: str) -> BaseException:
    outcome = capture(work)
    if not isinstance(outcome, Failure):
        _report("should_fail", subject, f"{subject} should have failed")
    log_debug("expectation_met", **make_event("should_fail", subject))
    return outcome.error


def _expect_failure_with(kind: type[BaseException], work: Callable[[], object], subject: str) -> BaseException:
    expected = kind_name(kind)
    outcome = capture(work)
    if not isinstance(outcome, Failure):
        _report("should_fail_with", subject, f"{subject} should have failed with an exception of type {expected}")
    error = outcome.error
    if not isinstance(error, kind):
        _report(
            "should_fail_with",
            subject,
            f"{subject} should have failed with an exception of type {expected}"
            f", instead got {describe_error(error)}",
        )
    log_debug("expectation_met", **make_event("should_fail_with", subject, {"kind": expected}))
    return error


def _report(operation: str, subject: str, message: str) -> NoReturn:
    log_debug("expectation_failed", **make_event(operation, subject))
    fail(message)


__all__ = [
    "fail",
    "work_label",
    "should_fail",
    "should_fail_with",
    "should_fail_with_cause",
    "should_fail_script",
    "assert_script",
]
