"""
TransitionTable: storage and lookup for a transition function δ(state, symbol).

States and symbols are opaque, case-sensitive str tokens. The table does no
validation of its own; Automaton checks it against Q and Σ at construction.
"""

from __future__ import annotations

from typing import Iterator, Mapping

from pydfa.core.errors import UnknownTransitionError


class TransitionTable:
    """
    Mapping state -> {symbol: next_state}.

    At most one next state is stored per (state, symbol) pair; adding the
    same pair again overwrites the previous target.

    Examples:
        >>> table = TransitionTable()
        >>> table.add_transition("q0", "1", "q1")
        >>> table.execute("q0", "1")
        'q1'
        >>> table.has_transition("q0", "0")
        False
    """

    def __init__(self) -> None:
        self._transitions: dict[str, dict[str, str]] = {}

    @classmethod
    def from_mapping(cls, mapping: Mapping[tuple[str, str], str]) -> TransitionTable:
        """Build a table from the flat {(state, symbol): next_state} form."""
        table = cls()
        for (state, symbol), next_state in mapping.items():
            table.add_transition(state, symbol, next_state)
        return table

    def add_transition(self, state: str, symbol: str, next_state: str) -> None:
        self._transitions.setdefault(state, {})[symbol] = next_state

    def has_transition(self, state: str, symbol: str) -> bool:
        return symbol in self._transitions.get(state, {})

    def has_transitions_for_state(self, state: str) -> bool:
        # States that only appear as targets are not keys here
        return state in self._transitions

    def transitions_count_for_state(self, state: str) -> int:
        return len(self._transitions.get(state, {}))

    def states_count(self) -> int:
        return len(self._transitions)

    def execute(self, state: str, symbol: str) -> str:
        """
        Return δ(state, symbol).

        Raises:
            UnknownTransitionError: If no transition is registered for the pair.
        """
        try:
            return self._transitions[state][symbol]
        except KeyError:
            raise UnknownTransitionError(state, symbol) from None

    def items(self) -> Iterator[tuple[tuple[str, str], str]]:
        """Iterate ((state, symbol), next_state) in insertion order."""
        for state, row in self._transitions.items():
            for symbol, next_state in row.items():
                yield (state, symbol), next_state

    def __len__(self) -> int:
        return sum(len(row) for row in self._transitions.values())

    def __contains__(self, pair: object) -> bool:
        if not isinstance(pair, tuple) or len(pair) != 2:
            return False
        return self.has_transition(*pair)

    def __repr__(self) -> str:
        return f"TransitionTable(states={self.states_count()}, transitions={len(self)})"
