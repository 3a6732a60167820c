"""Unique labels for anonymous scripts.

Every script evaluated by the expectation helpers is compiled under a fresh
name so tracebacks from repeated calls never collide. Names look like
``TestScript0.py``, ``TestScript1.py``, ... and the counter is never reset.
"""

from __future__ import annotations

import itertools
import threading
from typing import Final

TEST_SCRIPT_NAME_PREFIX: Final[str] = "TestScript"
TEST_SCRIPT_NAME_SUFFIX: Final[str] = ".py"


class ScriptNameGenerator:
    """Thread-safe source of ``<prefix><n><suffix>`` names.

    Examples
    --------
    >>> names = ScriptNameGenerator(prefix="Demo", start=5)
    >>> names.next_name(), names.next_name()
    ('Demo5.py', 'Demo6.py')
    """

    def __init__(
        self,
        *,
        prefix: str = TEST_SCRIPT_NAME_PREFIX,
        suffix: str = TEST_SCRIPT_NAME_SUFFIX,
        start: int = 0,
    ) -> None:
        self.prefix = prefix
        self.suffix = suffix
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def next_name(self) -> str:
        with self._lock:
            number = next(self._counter)
        return f"{self.prefix}{number}{self.suffix}"


DEFAULT_NAME_GENERATOR: Final[ScriptNameGenerator] = ScriptNameGenerator()
"""Process-wide generator used when callers do not inject their own."""


def generic_script_name() -> str:
    """Return the next name from :data:`DEFAULT_NAME_GENERATOR`."""

    return DEFAULT_NAME_GENERATOR.next_name()


__all__ = [
    "TEST_SCRIPT_NAME_PREFIX",
    "TEST_SCRIPT_NAME_SUFFIX",
    "ScriptNameGenerator",
    "DEFAULT_NAME_GENERATOR",
    "generic_script_name",
]
