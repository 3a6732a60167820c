"""Walk the causal chain of an exception.

Purpose
-------
Locate an exception of a given type among the errors that caused a failure
and, when none matches, render the chain so a human can see why.

Contents
--------
* :data:`MAX_NESTED_EXCEPTIONS` – hop limit shared by search and rendering.
* :func:`cause_of` – the next link, using the same rule as :mod:`traceback`.
* :func:`walk_chain` – the bounded chain as a tuple.
* :func:`find_in_chain` / :func:`find_cause_of_kind` – predicate search.
* :func:`describe_chain` – indented ``kind: message`` trail.
* :func:`kind_name` – stable display name for an exception type.

System Role
-----------
Consulted by :func:`lib_should_fail.application.expectations.should_fail_with_cause`
only. Terminates on self-referential causes, on longer cycles, and on
unbounded chains because every walk stops after
:data:`MAX_NESTED_EXCEPTIONS` hops.

Boundary
--------
Every walk accepts an optional ``boundary``: the exception the caller was
handling when the unit of work ran. Python attaches it as the implicit
``__context__`` of whatever the unit of work raises, so an implicit link to
the boundary ends the chain instead of leaking the caller's error into it.
"""

from __future__ import annotations

from typing import Callable, Final, Iterator

MAX_NESTED_EXCEPTIONS: Final[int] = 10
"""Number of cause hops followed before a walk gives up."""


def cause_of(error: BaseException, boundary: BaseException | None = None) -> BaseException | None:
    """Return the exception that caused *error*, if any.

    The explicit ``__cause__`` wins; otherwise the implicit ``__context__`` is
    used unless ``raise ... from None`` suppressed it or it is *boundary*.

    Examples
    --------
    >>> try:
    ...     try:
    ...         {}["k"]
    ...     except KeyError as exc:
    ...         raise ValueError("bad") from exc
    ... except ValueError as outer:
    ...     type(cause_of(outer)).__name__
    'KeyError'
    >>> handled = KeyError("caller")
    >>> raised = ValueError("work")
    >>> raised.__context__ = handled
    >>> cause_of(raised, handled) is None
    True
    """

    if error.__cause__ is not None:
        return error.__cause__
    if error.__suppress_context__:
        return None
    context = error.__context__
    if context is not None and context is boundary:
        return None
    return context


def _iter_chain(start: BaseException, boundary: BaseException | None) -> Iterator[BaseException]:
    current: BaseException | None = start
    hops = 0
    while current is not None:
        yield current
        following = cause_of(current, boundary)
        if following is current or hops >= MAX_NESTED_EXCEPTIONS:
            return
        current = following
        hops += 1


def walk_chain(start: BaseException, *, boundary: BaseException | None = None) -> tuple[BaseException, ...]:
    """Return *start* followed by at most :data:`MAX_NESTED_EXCEPTIONS` causes.

    Examples
    --------
    >>> looped = RuntimeError("loop")
    >>> looped.__cause__ = looped
    >>> len(walk_chain(looped))
    1
    """

    return tuple(_iter_chain(start, boundary))


def find_in_chain(
    start: BaseException | None,
    predicate: Callable[[BaseException], bool],
    *,
    boundary: BaseException | None = None,
) -> BaseException | None:
    """Return the first error in the chain of *start* satisfying *predicate*.

    Stops, in order of priority, on a match, a missing cause, a
    self-referential cause, or after :data:`MAX_NESTED_EXCEPTIONS` hops.
    ``None`` means nothing matched.
    """

    if start is None:
        return None
    for error in _iter_chain(start, boundary):
        if predicate(error):
            return error
    return None


def find_cause_of_kind(
    error: BaseException,
    kind: type[BaseException],
    *,
    boundary: BaseException | None = None,
) -> BaseException | None:
    """Search the causes of *error* (not *error* itself) for an instance of *kind*.

    Examples
    --------
    >>> outer = RuntimeError("outer")
    >>> outer.__cause__ = KeyError("inner")
    >>> find_cause_of_kind(outer, LookupError)
    KeyError('inner')
    >>> find_cause_of_kind(outer, RuntimeError) is None
    True
    """

    return find_in_chain(
        cause_of(error, boundary),
        lambda candidate: isinstance(candidate, kind),
        boundary=boundary,
    )


def kind_name(kind: type) -> str:
    """Return ``qualname`` for builtins and ``module.qualname`` otherwise.

    Examples
    --------
    >>> kind_name(ValueError)
    'ValueError'
    >>> from lib_should_fail.domain.errors import ExpectationNotMet
    >>> kind_name(ExpectationNotMet)
    'lib_should_fail.domain.errors.ExpectationNotMet'
    """

    if kind.__module__ == "builtins":
        return kind.__qualname__
    return f"{kind.__module__}.{kind.__qualname__}"


def describe_error(error: BaseException) -> str:
    """Render *error* as ``kind: message``."""

    return f"{kind_name(type(error))}: {error}"


def describe_chain(start: BaseException, *, boundary: BaseException | None = None) -> str:
    """Render the causal chain of *start*, one indented line per hop.

    Hop ``n >= 1`` is prefixed with ``"   " * (n - 1) + "-> "``. A
    self-referential cause ends the trail; a chain longer than
    :data:`MAX_NESTED_EXCEPTIONS` hops ends with ``...``.

    Examples
    --------
    >>> top = RuntimeError("top")
    >>> middle = KeyError("middle")
    >>> top.__cause__ = middle
    >>> middle.__cause__ = ValueError("bottom")
    >>> print(describe_chain(top), end="")
    RuntimeError: top
    -> KeyError: 'middle'
       -> ValueError: bottom
    """

    lines: list[str] = []
    current: BaseException | None = start
    level = 0
    while current is not None:
        prefix = ""
        if level > 1:
            prefix += "   " * (level - 1)
        if level > 0:
            prefix += "-> "
        if level > MAX_NESTED_EXCEPTIONS:
            lines.append(prefix + "...")
            break
        lines.append(prefix + describe_error(current) + "\n")
        following = cause_of(current, boundary)
        if following is current:
            break
        current = following
        level += 1
    return "".join(lines)


__all__ = [
    "MAX_NESTED_EXCEPTIONS",
    "cause_of",
    "walk_chain",
    "find_in_chain",
    "find_cause_of_kind",
    "kind_name",
    "describe_error",
    "describe_chain",
]
