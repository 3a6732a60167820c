"""Python script engine adapter.

Purpose
-------
Evaluate snippets of Python source for :func:`lib_should_fail.core.should_fail_script`
and :func:`lib_should_fail.core.assert_script`. It implements the
:class:`~lib_should_fail.application.ports.ScriptEngine` port.

Key behaviours
--------------
* Compiles with the generated script name as the filename so tracebacks point
  at ``TestScript<n>.py``.
* Executes each snippet in a fresh namespace from ``globals_factory``.
* ``SyntaxError`` from compilation surfaces unchanged.
* Errors raised by the script body are wrapped in
  :class:`~lib_should_fail.domain.errors.ScriptExecutionError` (chained with
  ``from``); the expectation helpers unwrap them again.
"""

from __future__ import annotations

from typing import Any, Callable

from ...domain.errors import ScriptExecutionError
from ...observability import log_debug


class PythonScriptEngine:
    """Run Python source with :func:`compile` and :func:`exec`."""

    def __init__(self, *, globals_factory: Callable[[], dict[str, Any]] | None = None) -> None:
        """Initialise the engine.

        Parameters
        ----------
        globals_factory:
            Returns the namespace each script runs in. Defaults to a new dict
            whose ``__name__`` is ``"__main__"``.
        """

        self._globals_factory = globals_factory or _fresh_namespace

    def evaluate(self, source: str, script_name: str) -> None:
        """Compile and execute *source* labelled as *script_name*.

        Examples
        --------
        >>> engine = PythonScriptEngine()
        >>> engine.evaluate("x = 1 + 1", "TestScript-doc.py")
        >>> try:
        ...     engine.evaluate("[][0]", "TestScript-doc.py")
        ... except ScriptExecutionError as exc:
        ...     type(exc.original).__name__, exc.script_name
        ('IndexError', 'TestScript-doc.py')
        """

        code = compile(source, script_name, "exec")
        namespace = self._globals_factory()
        log_debug("script_evaluating", operation="evaluate", label=script_name)
        try:
            exec(code, namespace)  # noqa: S102 - evaluating test snippets is the purpose
        except Exception as exc:
            raise ScriptExecutionError(script_name, exc) from exc


def _fresh_namespace() -> dict[str, Any]:
    return {"__name__": "__main__"}


__all__ = ["PythonScriptEngine"]
