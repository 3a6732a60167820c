"""Structured log events for expectations and the not-yet-implemented marker.

Purpose
    Let a test run explain itself: which expectation was checked against which
    unit of work, and whether a marked test was re-run, confirmed as broken, or
    caught passing. The library stays silent until the host attaches a handler.

Contents
    - ``EVENTS``: every event name the library emits, with its level.
    - ``TRACE_ID``: context variable carrying the running test's identifier.
    - ``get_logger`` / ``bind_trace_id``: host-facing hooks.
    - ``log_debug`` / ``log_info`` / ``log_error``: emitters used internally.
    - ``make_event``: builds the ``operation``/``label`` payload of an event.

Events
    ========================================  =======  =====================================
    name                                      level    emitted when
    ========================================  =======  =====================================
    ``expectation_met``                       DEBUG    a ``should_fail*`` helper succeeds
    ``expectation_failed``                    DEBUG    a ``should_fail*`` helper reports
    ``script_evaluating``                     DEBUG    the script engine compiled a script
    ``not_yet_implemented_running``           INFO     a marked test is about to re-run
    ``not_yet_implemented_confirmed``         INFO     the re-run failed, as expected
    ``not_yet_implemented_passed``            ERROR    the re-run passed; the test fails
    ========================================  =======  =====================================

    Each record carries ``record.context``: the bound ``trace_id`` merged with
    the event payload (``operation``, ``label`` and optional detail such as
    ``kind`` or ``error``).
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import Any, Final, Mapping

EVENTS: Final[Mapping[str, int]] = {
    "expectation_met": logging.DEBUG,
    "expectation_failed": logging.DEBUG,
    "script_evaluating": logging.DEBUG,
    "not_yet_implemented_running": logging.INFO,
    "not_yet_implemented_confirmed": logging.INFO,
    "not_yet_implemented_passed": logging.ERROR,
}

TRACE_ID: ContextVar[str | None] = ContextVar("lib_should_fail_trace_id", default=None)
"""Identifier of the running test, copied into every event's context."""

_LOGGER: Final[logging.Logger] = logging.getLogger("lib_should_fail")
_LOGGER.addHandler(logging.NullHandler())


def get_logger() -> logging.Logger:
    """Return the ``lib_should_fail`` logger so a test harness can attach handlers."""

    return _LOGGER


def bind_trace_id(trace_id: str | None) -> None:
    """Tag subsequent expectation and marker events with *trace_id*.

    A pytest fixture can bind ``request.node.nodeid`` so a marker confirmation
    can be traced back to its test. ``None`` clears the binding.

    Examples
    --------
    >>> bind_trace_id('tests/test_parser.py::test_parse')
    >>> TRACE_ID.get()
    'tests/test_parser.py::test_parse'
    >>> bind_trace_id(None)
    >>> TRACE_ID.get() is None
    True
    """

    TRACE_ID.set(trace_id)


def log_debug(message: str, **fields: Any) -> None:
    _emit(logging.DEBUG, message, fields)


def log_info(message: str, **fields: Any) -> None:
    _emit(logging.INFO, message, fields)


def log_error(message: str, **fields: Any) -> None:
    _emit(logging.ERROR, message, fields)


def make_event(
    operation: str,
    label: str | None,
    payload: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Build the payload of one event.

    ``operation`` names the helper (``should_fail_with``,
    ``not_yet_implemented``...), ``label`` the unit of work or test method.

    Examples
    --------
    >>> make_event('should_fail_with', 'Callable parse', {'kind': 'ValueError'})
    {'operation': 'should_fail_with', 'label': 'Callable parse', 'kind': 'ValueError'}
    """

    event: dict[str, Any] = {"operation": operation, "label": label}
    if payload:
        event |= dict(payload)
    return event


def _emit(level: int, message: str, fields: Mapping[str, Any]) -> None:
    context = {"trace_id": TRACE_ID.get()}
    context.update(fields)
    _LOGGER.log(level, message, extra={"context": context})
