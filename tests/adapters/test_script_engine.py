from __future__ import annotations

import pytest

from lib_should_fail.adapters.script_engine.python import PythonScriptEngine
from lib_should_fail.domain.errors import ScriptExecutionError


def test_evaluate_runs_source_in_fresh_namespace() -> None:
    seen: list[dict] = []

    def factory() -> dict:
        namespace = {"__name__": "__main__", "seen": seen}
        return namespace

    engine = PythonScriptEngine(globals_factory=factory)
    engine.evaluate("value = 41 + 1\nseen.append(dict(value=value))", "TestScript-a.py")
    engine.evaluate("seen.append(dict(defined='value' in globals()))", "TestScript-b.py")
    assert seen == [{"value": 42}, {"defined": False}]


def test_body_errors_are_wrapped_with_script_name() -> None:
    with pytest.raises(ScriptExecutionError) as info:
        PythonScriptEngine().evaluate("raise KeyError('k')", "TestScript-c.py")
    wrapper = info.value
    assert wrapper.script_name == "TestScript-c.py"
    assert isinstance(wrapper.original, KeyError)
    assert wrapper.__cause__ is wrapper.original


def test_traceback_points_at_script_name() -> None:
    with pytest.raises(ScriptExecutionError) as info:
        PythonScriptEngine().evaluate("x = 1\n1 / 0", "TestScript-d.py")
    frames = []
    tb = info.value.original.__traceback__
    while tb is not None:
        frames.append((tb.tb_frame.f_code.co_filename, tb.tb_lineno))
        tb = tb.tb_next
    assert ("TestScript-d.py", 2) in frames


def test_syntax_errors_surface_unwrapped() -> None:
    with pytest.raises(SyntaxError) as info:
        PythonScriptEngine().evaluate("def broken(:", "TestScript-e.py")
    assert info.value.filename == "TestScript-e.py"
