import pytest

from regexnfa.nfa import EPSILON, NFA, NFABuilder, State


def _closure(states):
    stack = list(states)
    seen = {id(s): s for s in stack}
    while stack:
        state = stack.pop()
        for t in state.transitions:
            if t.symbol is EPSILON and id(t.target) not in seen:
                seen[id(t.target)] = t.target
                stack.append(t.target)
    return list(seen.values())


def _accepts(nfa: NFA, text: str) -> bool:
    current = _closure([nfa.start])
    for ch in text:
        moved = [t.target for s in current for t in s.transitions if t.symbol == ch]
        current = _closure(moved)
    return any(s.is_accepting for s in current)


@pytest.fixture
def builder():
    return NFABuilder()


def test_char_structure(builder):
    nfa = builder.char("a")
    assert nfa.state_count == 2
    assert (nfa.start.id, nfa.accept.id) == (0, 1)
    assert nfa.accept.is_accepting
    assert not nfa.start.is_accepting
    assert [t.symbol for t in nfa.start.transitions] == ["a"]
    assert nfa.start.transitions[0].target is nfa.accept


def test_builders_number_independently():
    first = NFABuilder().char("x")
    second = NFABuilder().char("y")
    assert first.start.id == second.start.id == 0


def test_new_state_ids_increase(builder):
    a = builder.new_state(False)
    b = builder.new_state(True)
    assert b.id == a.id + 1
    assert b.is_accepting and not a.is_accepting


def test_transitions_most_recent_first(builder):
    s = builder.new_state(False)
    t = builder.new_state(True)
    s.add_transition("a", t)
    s.add_transition("b", t)
    assert [tr.symbol for tr in s.transitions] == ["b", "a"]


def test_char_accepts(builder):
    nfa = builder.char("a")
    assert len(nfa.start.transitions) == 1
    assert nfa.start.transitions[0].symbol == "a"
    assert nfa.accept.transitions == []
    assert _accepts(nfa, "a") is True
    assert _accepts(nfa, "") is False
    assert _accepts(nfa, "b") is False


def test_any_char(builder):
    nfa = builder.any_char()
    symbols = {t.symbol for t in nfa.start.transitions}
    assert {" ", "~", "\n", "\t", "\r"} <= symbols
    assert "\x7f" not in symbols
    assert len(nfa.start.transitions) == len(symbols)
    assert _accepts(nfa, "Z")
    assert not _accepts(nfa, "ab")


def test_epsilon(builder):
    nfa = builder.epsilon()
    assert nfa.start.transitions[0].symbol is EPSILON
    assert _accepts(nfa, "")
    assert not _accepts(nfa, "a")


def test_union(builder):
    a = builder.char("a")
    b = builder.char("b")
    nfa = builder.union(a, b)
    assert nfa.state_count == a.state_count + b.state_count + 2
    assert not a.accept.is_accepting and not b.accept.is_accepting
    assert _accepts(nfa, "a")
    assert _accepts(nfa, "b")
    assert not _accepts(nfa, "ab")
    assert not _accepts(nfa, "")


def test_concat_extends_first(builder):
    a = builder.char("a")
    b = builder.char("b")
    b_accept = b.accept
    nfa = builder.concat(a, b)
    assert nfa is a
    assert nfa.accept is b_accept
    assert nfa.state_count == 4
    assert _accepts(nfa, "ab")
    assert not _accepts(nfa, "a")
    assert not _accepts(nfa, "ba")


def test_kleene_star(builder):
    nfa = builder.kleene_star(builder.char("a"))
    assert nfa.state_count == 4
    for text in ("", "a", "aaa"):
        assert _accepts(nfa, text)
    assert not _accepts(nfa, "b")
    assert not _accepts(nfa, "ab")


def test_plus_matches_star_construction(builder):
    inner = builder.char("a")
    nfa = builder.plus(inner)
    assert nfa.state_count == 4
    assert (nfa.start.id, nfa.accept.id) == (2, 3)
    assert nfa.accept.is_accepting
    assert not inner.accept.is_accepting
    assert all(t.symbol is EPSILON for t in nfa.start.transitions)
    assert {id(t.target) for t in nfa.start.transitions} == {id(inner.start), id(nfa.accept)}
    assert _accepts(nfa, "a") is True
    assert _accepts(nfa, "aa") is True
    assert _accepts(nfa, "") is True
    assert _accepts(nfa, "b") is False


def test_question(builder):
    inner = builder.char("a")
    nfa = builder.question(inner)
    assert nfa.state_count == 4
    assert nfa.accept.is_accepting
    assert not inner.accept.is_accepting
    assert [t.target for t in inner.accept.transitions] == [nfa.accept]
    assert inner.accept.transitions[0].symbol is EPSILON
    assert len(nfa.start.transitions) == 2
    assert _accepts(nfa, "") is True
    assert _accepts(nfa, "a") is True
    assert _accepts(nfa, "aa") is False


def test_char_range(builder):
    nfa = builder.char_range("a", "c")
    assert sorted(t.symbol for t in nfa.start.transitions) == ["a", "b", "c"]
    assert _accepts(nfa, "b")
    assert not _accepts(nfa, "d")


def test_char_range_reversed_is_empty(builder):
    nfa = builder.char_range("z", "a")
    assert nfa.start.transitions == []
    assert not _accepts(nfa, "m")


def test_composite_expression(builder):
    # (a|b)*c
    body = builder.kleene_star(builder.union(builder.char("a"), builder.char("b")))
    nfa = builder.concat(body, builder.char("c"))
    assert _accepts(nfa, "c")
    assert _accepts(nfa, "abbac")
    assert not _accepts(nfa, "abba")
    assert sum(1 for _ in [nfa.accept] if isinstance(nfa.accept, State)) == 1