"""End-to-end usage of the public API from real test cases.

The classes below are collected by pytest itself, so the not-yet-implemented
marker runs against the genuine call stack of ``unittest`` and ``pytest``.
"""

from __future__ import annotations

import unittest

import pytest

import lib_should_fail
from lib_should_fail import (
    ExpectationNotMet,
    TestMethodNotFound,
    not_yet_implemented,
    should_fail,
    should_fail_script,
    should_fail_with,
    should_fail_with_cause,
)
from lib_should_fail.application.marker import ARMED
from lib_should_fail.testing import FAILURE_MESSAGE, i_should_fail, i_should_fail_with_cause


class TestRomanNumeralsUnittest(unittest.TestCase):
    def test_roman_numerals_not_supported_yet(self) -> None:
        if not_yet_implemented(self):
            return
        self.assertEqual(int("XII"), 12)

    def test_marker_is_disarmed_after_test(self) -> None:
        self.assertFalse(ARMED.get())


class TestRomanNumeralsPytest:
    def test_roman_numerals_not_supported_yet(self) -> None:
        self.runs = getattr(self, "runs", 0) + 1
        if not_yet_implemented(self):
            return
        assert int("XII") == 12


def test_marker_reruns_the_enclosing_test_once() -> None:
    case = TestRomanNumeralsPytest()
    case.test_roman_numerals_not_supported_yet()
    assert case.runs == 2
    assert ARMED.get() is False


class FixedFeature:
    def test_feature(self) -> None:
        if not_yet_implemented(self):
            return
        assert int("12") == 12


def test_marker_flags_tests_that_pass_unexpectedly() -> None:
    with pytest.raises(ExpectationNotMet, match="passes unexpectedly"):
        FixedFeature().test_feature()


def test_marker_outside_test_method_is_a_usage_error() -> None:
    with pytest.raises(TestMethodNotFound):
        not_yet_implemented(object())
    assert ARMED.get() is False


def test_should_fail_family_with_testing_helpers() -> None:
    assert str(should_fail(i_should_fail)) == FAILURE_MESSAGE
    assert isinstance(should_fail_with(RuntimeError, i_should_fail), RuntimeError)
    root = should_fail_with_cause(LookupError, lambda: i_should_fail_with_cause(depth=4))
    assert type(root) is LookupError


def test_should_fail_with_cause_points_to_should_fail_for_direct_errors() -> None:
    with pytest.raises(ExpectationNotMet, match="perhaps you meant should_fail"):
        should_fail_with_cause(RuntimeError, i_should_fail)


def test_should_fail_script_against_default_engine() -> None:
    error = should_fail_script("raise KeyError('from script')", LookupError)
    assert isinstance(error, KeyError)
    with pytest.raises(ExpectationNotMet, match="^Script should have failed$"):
        should_fail_script("value = 1")


def test_should_fail_script_keeps_syntax_errors() -> None:
    error = should_fail_script("def broken(:", SyntaxError)
    assert error.filename.startswith("TestScript")


def test_assert_script_labels_failures() -> None:
    with pytest.raises(lib_should_fail.ScriptExecutionError) as info:
        lib_should_fail.assert_script("assert 1 == 2")
    assert info.value.script_name.startswith("TestScript")
    assert isinstance(info.value.original, AssertionError)


def test_fail_is_the_reporting_primitive() -> None:
    with pytest.raises(ExpectationNotMet) as info:
        lib_should_fail.fail()
    assert str(info.value) == ""
