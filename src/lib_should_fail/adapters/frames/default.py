"""Call-stack adapter backed by :mod:`inspect`.

Implements :class:`~lib_should_fail.application.ports.FrameProvider` by
walking ``f_back`` links from the caller's frame.
"""

from __future__ import annotations

import inspect
from types import FrameType


class StackFrameProvider:
    """Return the live call stack, innermost frame first."""

    def frames(self) -> list[FrameType]:
        """Return every frame from the caller of :meth:`frames` to the bottom.

        Examples
        --------
        >>> stack = StackFrameProvider().frames()
        >>> stack[0].f_code.co_name
        '<module>'
        """

        collected: list[FrameType] = []
        current = inspect.currentframe()
        frame = current.f_back if current is not None else None
        try:
            while frame is not None:
                collected.append(frame)
                frame = frame.f_back
        finally:
            del current, frame
        return collected


__all__ = ["StackFrameProvider"]
