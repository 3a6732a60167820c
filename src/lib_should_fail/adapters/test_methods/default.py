"""Recognise test methods the way ``unittest`` and ``pytest`` name them.

Implements :data:`~lib_should_fail.application.ports.TestMethodPredicate`.
A function qualifies when it

* has a public name (no leading underscore),
* takes no parameters besides ``self``,
* has no return annotation or a ``None`` one, and
* is named ``test*`` or carries a truthy ``__test__`` attribute.
"""

from __future__ import annotations

import inspect
from typing import Callable, Final

TEST_METHOD_PREFIX: Final[str] = "test"

_VOID_ANNOTATIONS: Final[tuple[object, ...]] = (inspect.Signature.empty, None, "None")


def is_test_method(function: Callable[..., object]) -> bool:
    """Return ``True`` when *function* looks like a runnable test method.

    Examples
    --------
    >>> def test_ok(self) -> None: ...
    >>> def test_fixture(self, tmp_path): ...
    >>> def helper(self): ...
    >>> is_test_method(test_ok), is_test_method(test_fixture), is_test_method(helper)
    (True, False, False)
    >>> helper.__test__ = True
    >>> is_test_method(helper)
    True
    """

    name = getattr(function, "__name__", "")
    if not callable(function) or not name or name.startswith("_"):
        return False
    try:
        signature = inspect.signature(function)
    except (TypeError, ValueError):
        return False
    if signature.return_annotation not in _VOID_ANNOTATIONS:
        return False
    parameters = list(signature.parameters.values())
    if len(parameters) != 1 or parameters[0].kind not in (
        inspect.Parameter.POSITIONAL_ONLY,
        inspect.Parameter.POSITIONAL_OR_KEYWORD,
    ):
        return False
    return name.startswith(TEST_METHOD_PREFIX) or getattr(function, "__test__", False) is True


__all__ = ["TEST_METHOD_PREFIX", "is_test_method"]
