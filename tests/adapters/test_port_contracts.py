"""Adapter contract tests for the default ports implementation.

Verify the default adapters continue to satisfy the application-layer ports
defined in ``src/lib_should_fail/application/ports.py``.
"""

from __future__ import annotations

from lib_should_fail.adapters.frames.default import StackFrameProvider
from lib_should_fail.adapters.script_engine.python import PythonScriptEngine
from lib_should_fail.adapters.test_methods.default import is_test_method
from lib_should_fail.application import ports
from lib_should_fail.application.naming import ScriptNameGenerator


def test_python_script_engine_contract() -> None:
    engine = PythonScriptEngine()
    assert isinstance(engine, ports.ScriptEngine)
    assert engine.evaluate("pass", "TestScript-contract.py") is None


def test_stack_frame_provider_contract() -> None:
    provider = StackFrameProvider()
    assert isinstance(provider, ports.FrameProvider)
    frames = provider.frames()
    assert frames[0].f_code is test_stack_frame_provider_contract.__code__
    assert all(inner.f_back is outer for inner, outer in zip(frames, frames[1:]))


def test_script_name_generator_contract() -> None:
    names = ScriptNameGenerator()
    assert isinstance(names, ports.NameGenerator)
    assert names.next_name() != names.next_name()


def test_is_test_method_contract() -> None:
    predicate: ports.TestMethodPredicate = is_test_method
    assert predicate(test_is_test_method_contract) is False
