"""Public package surface for failure expectations in tests.

``import lib_should_fail`` gives test authors the expectation helpers
(:func:`should_fail` and friends), the not-yet-implemented marker, the error
taxonomy, and the logging hooks. ``python -m lib_should_fail`` runs the CLI.
"""

from __future__ import annotations

from .core import (
    MAX_NESTED_EXCEPTIONS,
    ExpectationNotMet,
    ScriptExecutionError,
    ShouldFailError,
    TestMethodNotFound,
    assert_script,
    describe_chain,
    fail,
    find_in_chain,
    generic_script_name,
    not_yet_implemented,
    not_yet_implemented_test,
    should_fail,
    should_fail_script,
    should_fail_with,
    should_fail_with_cause,
    walk_chain,
)
from .observability import bind_trace_id, get_logger
from .testing import i_should_fail, i_should_fail_with_cause

__all__ = [
    "MAX_NESTED_EXCEPTIONS",
    "ExpectationNotMet",
    "ScriptExecutionError",
    "ShouldFailError",
    "TestMethodNotFound",
    "assert_script",
    "bind_trace_id",
    "describe_chain",
    "fail",
    "find_in_chain",
    "generic_script_name",
    "get_logger",
    "i_should_fail",
    "i_should_fail_with_cause",
    "not_yet_implemented",
    "not_yet_implemented_test",
    "should_fail",
    "should_fail_script",
    "should_fail_with",
    "should_fail_with_cause",
    "walk_chain",
]
