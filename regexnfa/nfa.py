"""Thompson-style NFA construction from regular-expression building blocks."""

from __future__ import annotations

from dataclasses import dataclass, field

EPSILON: str | None = None
"""Symbol used for epsilon (empty) transitions."""

_PRINTABLE = range(32, 127)
_ESCAPES = ("\n", "\t", "\r")


@dataclass(eq=False)
class Transition:
    """An edge labelled with a symbol, or EPSILON, leading to a target state."""

    symbol: str | None
    target: State


@dataclass(eq=False)
class State:
    """A state of an NFA with its outgoing transitions, most recent first."""

    id: int
    is_accepting: bool = False
    transitions: list[Transition] = field(default_factory=list, repr=False)

    def add_transition(self, symbol: str | None, to: State) -> None:
        """Add a transition on ``symbol`` to state ``to``."""
        self.transitions.insert(0, Transition(symbol, to))


@dataclass(eq=False)
class NFA:
    """An NFA fragment with a single start state and a single accept state."""

    start: State
    accept: State
    state_count: int


class NFABuilder:
    """Builds NFA fragments, numbering new states from zero."""

    def __init__(self) -> None:
        self._next_id = 0

    def new_state(self, is_accepting: bool = False) -> State:
        """Create a state with the next free id."""
        state = State(self._next_id, is_accepting)
        self._next_id += 1
        return state

    def _fragment(self, extra_states: int = 0) -> NFA:
        start = self.new_state(False)
        accept = self.new_state(True)
        return NFA(start, accept, extra_states + 2)

    def char(self, c: str) -> NFA:
        """NFA accepting the single character ``c``."""
        nfa = self._fragment()
        nfa.start.add_transition(c, nfa.accept)
        return nfa

    def any_char(self) -> NFA:
        """NFA accepting any printable ASCII character, newline, tab or carriage return."""
        nfa = self._fragment()
        for code in _PRINTABLE:
            nfa.start.add_transition(chr(code), nfa.accept)
        for c in _ESCAPES:
            nfa.start.add_transition(c, nfa.accept)
        return nfa

    def epsilon(self) -> NFA:
        """NFA accepting only the empty string."""
        nfa = self._fragment()
        nfa.start.add_transition(EPSILON, nfa.accept)
        return nfa

    def union(self, first: NFA, second: NFA) -> NFA:
        """NFA accepting what either ``first`` or ``second`` accepts."""
        nfa = self._fragment(first.state_count + second.state_count)
        nfa.start.add_transition(EPSILON, first.start)
        nfa.start.add_transition(EPSILON, second.start)
        for part in (first, second):
            part.accept.is_accepting = False
            part.accept.add_transition(EPSILON, nfa.accept)
        return nfa

    def concat(self, first: NFA, second: NFA) -> NFA:
        """Append ``second`` to ``first``; ``first`` is extended and returned."""
        first.state_count += second.state_count
        first.accept.is_accepting = False
        first.accept.add_transition(EPSILON, second.start)
        first.accept = second.accept
        return first

    def kleene_star(self, nfa: NFA) -> NFA:
        """NFA accepting zero or more repetitions of ``nfa``."""
        wrapped = self._fragment(nfa.state_count)
        wrapped.start.add_transition(EPSILON, nfa.start)
        wrapped.start.add_transition(EPSILON, wrapped.accept)
        nfa.accept.is_accepting = False
        nfa.accept.add_transition(EPSILON, nfa.start)
        nfa.accept.add_transition(EPSILON, wrapped.accept)
        return wrapped

    def plus(self, nfa: NFA) -> NFA:
        """Repetition of ``nfa``; built the same way as the Kleene star."""
        return self.kleene_star(nfa)

    def question(self, nfa: NFA) -> NFA:
        """NFA accepting ``nfa`` or the empty string."""
        wrapped = self._fragment(nfa.state_count)
        wrapped.start.add_transition(EPSILON, nfa.start)
        wrapped.start.add_transition(EPSILON, wrapped.accept)
        nfa.accept.is_accepting = False
        nfa.accept.add_transition(EPSILON, wrapped.accept)
        return wrapped

    def char_range(self, start: str, end: str) -> NFA:
        """NFA accepting any single character from ``start`` to ``end`` inclusive."""
        nfa = self._fragment()
        for code in range(ord(start), ord(end) + 1):
            nfa.start.add_transition(chr(code), nfa.accept)
        return nfa