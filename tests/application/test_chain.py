from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from lib_should_fail.application.chain import (
    MAX_NESTED_EXCEPTIONS,
    cause_of,
    describe_chain,
    find_cause_of_kind,
    find_in_chain,
    kind_name,
    walk_chain,
)


class Marker(Exception):
    pass


def build_chain(length: int, *, loop_to: int | None = None) -> list[BaseException]:
    """Return ``length`` RuntimeErrors linked via ``__cause__``; optionally loop the tail back."""

    links: list[BaseException] = [RuntimeError(f"link {index}") for index in range(length)]
    for current, following in zip(links, links[1:]):
        current.__cause__ = following
    if loop_to is not None:
        links[-1].__cause__ = links[loop_to]
    return links


def test_cause_of_prefers_explicit_cause() -> None:
    error = RuntimeError("outer")
    error.__context__ = KeyError("context")
    error.__cause__ = ValueError("cause")
    assert isinstance(cause_of(error), ValueError)


def test_cause_of_falls_back_to_context() -> None:
    try:
        try:
            raise KeyError("first")
        except KeyError:
            raise ValueError("second")
    except ValueError as exc:
        assert isinstance(cause_of(exc), KeyError)


def test_cause_of_honours_suppressed_context() -> None:
    try:
        try:
            raise KeyError("first")
        except KeyError:
            raise ValueError("second") from None
    except ValueError as exc:
        assert cause_of(exc) is None


def test_cause_of_stops_at_boundary_context() -> None:
    handled = KeyError("handled")
    error = ValueError("raised")
    error.__context__ = handled
    assert cause_of(error, handled) is None
    assert cause_of(error) is handled


def test_cause_of_keeps_explicit_cause_equal_to_boundary() -> None:
    handled = KeyError("handled")
    error = ValueError("raised")
    error.__cause__ = handled
    assert cause_of(error, handled) is handled


def test_walks_end_at_boundary() -> None:
    handled = Marker("handled")
    links = build_chain(2)
    links[-1].__context__ = handled
    assert walk_chain(links[0], boundary=handled) == tuple(links)
    assert find_cause_of_kind(links[0], Marker, boundary=handled) is None
    assert find_cause_of_kind(links[0], Marker) is handled
    assert describe_chain(links[0], boundary=handled) == "RuntimeError: link 0\n-> RuntimeError: link 1\n"


def test_find_in_chain_returns_nested_match() -> None:
    links = build_chain(3)
    target = Marker("target")
    links[-1].__cause__ = target
    assert find_in_chain(links[0], lambda error: isinstance(error, Marker)) is target


def test_find_in_chain_checks_start_first() -> None:
    start = Marker("start")
    start.__cause__ = Marker("later")
    assert find_in_chain(start, lambda error: isinstance(error, Marker)) is start


def test_find_in_chain_accepts_none_start() -> None:
    assert find_in_chain(None, lambda error: True) is None


def test_find_in_chain_stops_at_self_cycle() -> None:
    looped = RuntimeError("loop")
    looped.__cause__ = looped
    assert find_in_chain(looped, lambda error: isinstance(error, Marker)) is None


def test_find_in_chain_reaches_exactly_ten_hops() -> None:
    links = build_chain(MAX_NESTED_EXCEPTIONS + 1)
    links[-1] = Marker("deep")
    links[-2].__cause__ = links[-1]
    assert find_in_chain(links[0], lambda error: isinstance(error, Marker)) is links[-1]


def test_find_in_chain_gives_up_after_ten_hops() -> None:
    links = build_chain(MAX_NESTED_EXCEPTIONS + 2)
    too_deep = Marker("too deep")
    links[-2].__cause__ = too_deep
    links[-1] = too_deep
    assert walk_chain(links[0])[-1] is links[MAX_NESTED_EXCEPTIONS]
    assert find_in_chain(links[0], lambda error: isinstance(error, Marker)) is None


@given(length=st.integers(min_value=1, max_value=40), data=st.data())
def test_cyclic_chains_terminate_without_match(length: int, data: st.DataObject) -> None:
    loop_to = data.draw(st.integers(min_value=0, max_value=length - 1))
    links = build_chain(length, loop_to=loop_to)
    assert find_in_chain(links[0], lambda error: isinstance(error, Marker)) is None
    assert len(walk_chain(links[0])) <= MAX_NESTED_EXCEPTIONS + 1


@given(length=st.integers(min_value=1, max_value=40))
def test_walk_chain_is_bounded(length: int) -> None:
    links = build_chain(length)
    chain = walk_chain(links[0])
    assert len(chain) == min(length, MAX_NESTED_EXCEPTIONS + 1)
    assert list(chain) == links[: len(chain)]


def test_find_cause_of_kind_skips_the_error_itself() -> None:
    outer = Marker("outer")
    outer.__cause__ = RuntimeError("inner")
    assert find_cause_of_kind(outer, Marker) is None


def test_kind_name_qualifies_non_builtins() -> None:
    assert kind_name(KeyError) == "KeyError"
    assert kind_name(Marker) == f"{__name__}.Marker"


def test_describe_chain_indents_each_hop() -> None:
    links = build_chain(4)
    assert describe_chain(links[0]) == (
        "RuntimeError: link 0\n"
        "-> RuntimeError: link 1\n"
        "   -> RuntimeError: link 2\n"
        "      -> RuntimeError: link 3\n"
    )


def test_describe_chain_stops_at_self_cycle() -> None:
    looped = RuntimeError("loop")
    looped.__cause__ = looped
    assert describe_chain(looped) == "RuntimeError: loop\n"


def test_describe_chain_truncates_long_chains() -> None:
    links = build_chain(MAX_NESTED_EXCEPTIONS + 5)
    lines = describe_chain(links[0]).split("\n")
    assert len(lines) == MAX_NESTED_EXCEPTIONS + 2
    assert lines[-2].endswith(f"link {MAX_NESTED_EXCEPTIONS}")
    assert lines[-1] == "   " * MAX_NESTED_EXCEPTIONS + "-> ..."


def test_describe_chain_terminates_on_longer_cycle() -> None:
    links = build_chain(3, loop_to=0)
    rendered = describe_chain(links[0])
    assert rendered.endswith("-> ...")
    assert rendered.count("\n") == MAX_NESTED_EXCEPTIONS + 1
