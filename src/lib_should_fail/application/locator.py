"""Find the test method that is currently running on an object.

Purpose
-------
The not-yet-implemented marker needs to re-run the test that called it. This
module scans the call stack for a frame executing a recognised test method
declared on the owner's class.

Contents
--------
* :class:`TestMethod` – name plus function of a located test method.
* :func:`locate_test_method` – stack scan, outermost frame first.
* :func:`resolve_test_method` – turn an explicit name or function into a
  :class:`TestMethod` without touching the stack.

System Role
-----------
Frames come from a :class:`~lib_should_fail.application.ports.FrameProvider`
and recognition from a
:data:`~lib_should_fail.application.ports.TestMethodPredicate`, both injected by
:mod:`lib_should_fail.core`.
"""

from __future__ import annotations

import inspect
import types
from dataclasses import dataclass
from typing import Any, Callable

from ..domain.errors import TestMethodNotFound
from .ports import FrameProvider, TestMethodPredicate


@dataclass(frozen=True)
class TestMethod:
    """A test method declared on the owner's class."""

    __test__ = False

    name: str
    function: Callable[..., object]

    def bind(self, owner: object) -> Callable[[], object]:
        """Return :attr:`function` bound to *owner*, ready to call."""

        return types.MethodType(self.function, owner)


def locate_test_method(
    owner: object,
    *,
    frames: FrameProvider,
    is_test: TestMethodPredicate,
) -> TestMethod:
    """Return the outermost running test method declared on ``type(owner)``.

    Scanning starts at the bottom of the stack so the top-level test is found
    even when the caller sits inside nested helpers that happen to look like
    tests. A frame matches when its code object belongs to a function found in
    ``vars(type(owner))`` (decorators are unwrapped for the comparison) and the
    function passes *is_test*.

    Raises
    ------
    TestMethodNotFound
        No frame matched.
    """

    owner_type = type(owner)
    declared = vars(owner_type)
    for frame in reversed(frames.frames()):
        code = frame.f_code
        candidate = declared.get(code.co_name)
        if candidate is None or _code_of(candidate) is not code:
            continue
        if is_test(candidate):
            return TestMethod(code.co_name, candidate)
    raise TestMethodNotFound(f"No test method of {owner_type.__qualname__} found in call stack")


def resolve_test_method(owner: object, method: str | Callable[..., object]) -> TestMethod:
    """Build a :class:`TestMethod` from an explicit *method* handle.

    *method* is either an attribute name on ``type(owner)`` or the function (or
    bound method) itself.
    """

    if isinstance(method, str):
        function = getattr(type(owner), method, None)
        if function is None:
            raise TestMethodNotFound(f"{type(owner).__qualname__} has no test method {method!r}")
        return TestMethod(method, function)
    function = getattr(method, "__func__", method)
    return TestMethod(getattr(function, "__name__", repr(function)), function)


def _code_of(candidate: Any) -> types.CodeType | None:
    try:
        target = inspect.unwrap(candidate)
    except ValueError:
        return None
    return getattr(target, "__code__", None)


__all__ = ["TestMethod", "locate_test_method", "resolve_test_method"]
