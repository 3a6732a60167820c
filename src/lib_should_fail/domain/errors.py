"""Domain-level exception hierarchy.

Purpose
-------
Expose the stable error taxonomy shared by the expectation helpers, the
adapters, and consuming test suites. The hierarchy lives in the domain layer
so the application and adapter layers can depend on it without importing each
other.

Contents
--------
* :class:`ShouldFailError` – umbrella base class for library-originated
  runtime errors.
* :class:`ExpectationNotMet` – raised by :func:`lib_should_fail.core.fail`
  when an expectation does not hold. Subclasses :class:`AssertionError` so test
  runners report it as an ordinary test failure.
* :class:`ScriptExecutionError` – wrapper raised by script engines around the
  real error thrown by a script body.
* :class:`TestMethodNotFound` – the active-test locator found no recognised
  test method in the call stack.

System Role
-----------
Expectation failures are reported as :class:`ExpectationNotMet`; usage errors
(:class:`TestMethodNotFound`) stay outside the ``AssertionError`` family so they
surface as errors rather than failures.
"""

from __future__ import annotations


class ShouldFailError(Exception):
    """Base type for runtime errors emitted by ``lib_should_fail``.

    Why
    ----
    Provide a single catch-all type for callers that do not need fine-grained
    handling. :class:`ExpectationNotMet` is deliberately not part of this
    family; it belongs to :class:`AssertionError`.
    """


class ExpectationNotMet(AssertionError):
    """Raised when a unit of work did not fail the way the caller expected.

    Covers the three reported conditions: no failure or the wrong type, a
    ``None`` expected cause type, and a direct exception where a nested cause
    was expected. The message tells them apart.
    """


class ScriptExecutionError(ShouldFailError):
    """Wrapper around the real error raised while a script body executed.

    Why
    ----
    Script engines annotate failures with the generated script name so a
    failing ``assert_script`` call is easy to trace. Expectation helpers unwrap
    one level and inspect :attr:`original` instead.

    Attributes
    ----------
    script_name:
        Label the script was compiled under.
    original:
        The exception raised by the script body, or ``None`` when the wrapper
        carries no underlying error.
    """

    def __init__(self, script_name: str, original: BaseException | None = None) -> None:
        self.script_name = script_name
        self.original = original
        if original is None:
            detail = "script failed"
        else:
            detail = f"{type(original).__name__}: {original}"
        super().__init__(f"{script_name}: {detail}")


class TestMethodNotFound(ShouldFailError, RuntimeError):
    """No recognised test method of the owner was found in the call stack.

    Indicates a usage error by the test author (the marker was called outside
    a test method, or from a helper object), not a property of the code under
    test. Propagates instead of being reported as an expectation failure.
    """

    __test__ = False


__all__ = [
    "ShouldFailError",
    "ExpectationNotMet",
    "ScriptExecutionError",
    "TestMethodNotFound",
]
