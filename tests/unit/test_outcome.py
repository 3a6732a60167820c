from __future__ import annotations

import dataclasses

import pytest

from lib_should_fail.domain.outcome import Failure, Success


def test_success_and_failure_report_failed_flag() -> None:
    error = ValueError("boom")
    assert Success().failed is False
    assert Failure(error).failed is True
    assert Failure(error).error is error


def test_outcomes_are_immutable() -> None:
    failure = Failure(ValueError("boom"))
    with pytest.raises(dataclasses.FrozenInstanceError):
        failure.error = KeyError("other")  # type: ignore[misc]
