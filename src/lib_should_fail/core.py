"""Composition root for ``lib_should_fail``.

Purpose
-------
Provide the stable entry points test authors import. Each function wires the
application-layer helpers to the default adapters (Python script engine,
live call stack, ``unittest``/``pytest`` naming rules) while still accepting
replacements as keyword arguments.

Contents
--------
* :data:`DEFAULT_SCRIPT_ENGINE` / :data:`DEFAULT_FRAME_PROVIDER` – shared
  adapter instances.
* :func:`should_fail` / :func:`should_fail_with` / :func:`should_fail_with_cause`
  – re-exported expectation helpers for callables.
* :func:`should_fail_script` / :func:`assert_script` – script variants bound
  to the default engine and name generator.
* :func:`not_yet_implemented` / :func:`not_yet_implemented_test` – the
  known-broken test marker.
* :func:`fail` – the reporting primitive.

System Role
-----------
The only module that knows about concrete adapters. Swap an adapter here (or
per call) without touching the application layer.
"""

from __future__ import annotations

from typing import Callable, Final

from .adapters.frames.default import StackFrameProvider
from .adapters.script_engine.python import PythonScriptEngine
from .adapters.test_methods.default import is_test_method
from .application import expectations as _expectations
from .application import marker as _marker
from .application.chain import MAX_NESTED_EXCEPTIONS, describe_chain, find_in_chain, walk_chain
from .application.expectations import fail, should_fail, should_fail_with, should_fail_with_cause
from .application.marker import not_yet_implemented_test
from .application.naming import DEFAULT_NAME_GENERATOR, generic_script_name
from .application.ports import FrameProvider, NameGenerator, ScriptEngine, TestMethodPredicate
from .domain.errors import ExpectationNotMet, ScriptExecutionError, ShouldFailError, TestMethodNotFound

DEFAULT_SCRIPT_ENGINE: Final[PythonScriptEngine] = PythonScriptEngine()
DEFAULT_FRAME_PROVIDER: Final[StackFrameProvider] = StackFrameProvider()


def should_fail_script(
    source: str,
    kind: type[BaseException] | None = None,
    *,
    engine: ScriptEngine | None = None,
    names: NameGenerator | None = None,
) -> BaseException:
    """Assert that evaluating *source* raises, optionally an instance of *kind*.

    Examples
    --------
    >>> should_fail_script("import json; json.loads('{')", ValueError).__class__.__name__
    'JSONDecodeError'
    """

    return _expectations.should_fail_script(
        source,
        kind,
        engine=engine or DEFAULT_SCRIPT_ENGINE,
        names=names or DEFAULT_NAME_GENERATOR,
    )


def assert_script(
    source: str,
    *,
    engine: ScriptEngine | None = None,
    names: NameGenerator | None = None,
) -> None:
    """Evaluate *source* and propagate any error it raises.

    Examples
    --------
    >>> assert_script("assert sorted([3, 1, 2]) == [1, 2, 3]")
    """

    _expectations.assert_script(
        source,
        engine=engine or DEFAULT_SCRIPT_ENGINE,
        names=names or DEFAULT_NAME_GENERATOR,
    )


def not_yet_implemented(
    owner: object,
    *,
    method: str | Callable[..., object] | None = None,
    frames: FrameProvider | None = None,
    is_test: TestMethodPredicate | None = None,
) -> bool:
    """Re-run the calling test method of *owner* and expect it to fail.

    Use as the first statement of a known-broken test::

        def test_feature(self):
            if not_yet_implemented(self):
                return
            ...

    See :func:`lib_should_fail.application.marker.not_yet_implemented`.
    """

    return _marker.not_yet_implemented(
        owner,
        frames=frames or DEFAULT_FRAME_PROVIDER,
        is_test=is_test or is_test_method,
        method=method,
    )


__all__ = [
    "MAX_NESTED_EXCEPTIONS",
    "DEFAULT_SCRIPT_ENGINE",
    "DEFAULT_FRAME_PROVIDER",
    "ExpectationNotMet",
    "ScriptExecutionError",
    "ShouldFailError",
    "TestMethodNotFound",
    "fail",
    "should_fail",
    "should_fail_with",
    "should_fail_with_cause",
    "should_fail_script",
    "assert_script",
    "not_yet_implemented",
    "not_yet_implemented_test",
    "generic_script_name",
    "describe_chain",
    "find_in_chain",
    "walk_chain",
]
