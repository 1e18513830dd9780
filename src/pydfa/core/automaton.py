"""
Automaton: the deterministic finite automaton five-tuple (Q, Σ, q0, F, δ).

Construction validates, fail-fast and in a fixed order:
1. alphabet (Σ)
2. allowed states (Q)
3. accepted states (F ⊆ Q)
4. initial state (q0 ∈ Q)
5. transition table (δ total and closed over Q × Σ)

The order is part of the contract: when several components are invalid,
the error for the earliest check is the one raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from pydfa.core.errors import (
    InvalidAutomatonError,
    InvalidTokenTypeError,
    RejectedInputError,
    UnknownSymbolError,
)
from pydfa.core.transitions import TransitionTable

logger = logging.getLogger(__name__)


_ALPHABET_MESSAGES = {
    "empty": "Invalid alphabet array. Expected non-empty array.",
    "not_string": "Invalid type for alphabet symbol: {!r}. Expected string.",
    "empty_string": "Invalid value for symbol '{}' in alphabet. Expected non-empty string.",
    "duplicate": "Duplicate symbol '{}' in alphabet. Expected alphabet symbols to be unique.",
}

_STATES_MESSAGES = {
    "empty": "Invalid allowed states array. Expected non-empty array.",
    "not_string": "Invalid type for allowed state: {!r}. Expected string.",
    "empty_string": "Invalid value for allowed state '{}'. Expected non-empty string.",
    "duplicate": "Duplicate allowed state '{}'. Expected allowed states to be unique.",
}


def _validate_unique_tokens(values: tuple, messages: dict[str, str]) -> None:
    if not values:
        raise InvalidAutomatonError(messages["empty"])

    seen: set[str] = set()
    for value in values:
        if not isinstance(value, str):
            raise InvalidTokenTypeError(messages["not_string"].format(value), value)
        if value == "":
            raise InvalidAutomatonError(messages["empty_string"].format(value), value)
        if value in seen:
            raise InvalidAutomatonError(messages["duplicate"].format(value), value)
        seen.add(value)


@dataclass(frozen=True)
class Automaton:
    """
    Deterministic finite automaton.

    Q, Σ and F keep the order they were given in; Q and Σ must not contain
    duplicates. Every (state, symbol) pair of Q × Σ must have a transition
    into Q.

    Examples:
        >>> table = TransitionTable.from_mapping({
        ...     ("even", "1"): "odd", ("even", "0"): "even",
        ...     ("odd", "1"): "even", ("odd", "0"): "odd",
        ... })
        >>> parity = Automaton(
        ...     states=("even", "odd"),
        ...     alphabet=("0", "1"),
        ...     initial_state="even",
        ...     accept_states=("even", "odd"),
        ...     transitions=table,
        ... )
        >>> parity.execute("1101")
        'odd'
    """

    states: Sequence[str]
    alphabet: Sequence[str]
    initial_state: str
    accept_states: Sequence[str]
    transitions: TransitionTable
    _state_set: frozenset = field(init=False, repr=False, compare=False)
    _alphabet_set: frozenset = field(init=False, repr=False, compare=False)
    _accept_set: frozenset = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "states", tuple(self.states))
        object.__setattr__(self, "alphabet", tuple(self.alphabet))
        object.__setattr__(self, "accept_states", tuple(self.accept_states))

        _validate_unique_tokens(self.alphabet, _ALPHABET_MESSAGES)
        _validate_unique_tokens(self.states, _STATES_MESSAGES)
        object.__setattr__(self, "_state_set", frozenset(self.states))
        self._validate_accept_states()
        self._validate_initial_state()
        self._validate_transitions()

        object.__setattr__(self, "_alphabet_set", frozenset(self.alphabet))
        object.__setattr__(self, "_accept_set", frozenset(self.accept_states))

        logger.debug(
            "validated automaton: %d states, %d symbols, %d accepting",
            len(self.states),
            len(self.alphabet),
            len(self.accept_states),
        )

    def _is_allowed_state(self, value: object) -> bool:
        # Allowed states are all str; anything else (possibly unhashable) is unknown
        return isinstance(value, str) and value in self._state_set

    def _validate_accept_states(self) -> None:
        for state in self.accept_states:
            if not self._is_allowed_state(state):
                raise InvalidAutomatonError(
                    f"Unknown accepted state '{state}'. "
                    "Expected accepted state to be found in list of allowed states.",
                    state,
                )

    def _validate_initial_state(self) -> None:
        if not self._is_allowed_state(self.initial_state):
            raise InvalidAutomatonError(
                f"Unknown initial state '{self.initial_state}'. "
                "Expected initial state to be found in list of allowed states.",
                self.initial_state,
            )

    def _validate_transitions(self) -> None:
        table = self.transitions

        for state in self.states:
            if not table.has_transitions_for_state(state):
                raise InvalidAutomatonError(
                    f"Transitions not defined for state '{state}'.", state
                )
            self._validate_transitions_for_state(state)

        n_table_states = table.states_count()
        n_allowed = len(self.states)
        if n_table_states > n_allowed:
            raise InvalidAutomatonError(
                f"Transitions exist for {n_table_states} states but there are only "
                f"{n_allowed} allowed states. "
                "Expected transitions to be defined only for allowed states.",
                n_table_states,
            )

    def _validate_transitions_for_state(self, state: str) -> None:
        table = self.transitions

        for symbol in self.alphabet:
            if not table.has_transition(state, symbol):
                raise InvalidAutomatonError(
                    f"Missing transition for state '{state}' and symbol '{symbol}'. "
                    "Expected transition to be defined.",
                    (state, symbol),
                )

            next_state = table.execute(state, symbol)
            if not self._is_allowed_state(next_state):
                raise InvalidAutomatonError(
                    f"Transition for state '{state}' and symbol '{symbol}' leads to an "
                    f"invalid next state of '{next_state}'. "
                    "Expected next state to be in list of allowed states.",
                    next_state,
                )

        n_transitions = table.transitions_count_for_state(state)
        n_symbols = len(self.alphabet)
        if n_transitions > n_symbols:
            raise InvalidAutomatonError(
                f"There are {n_transitions} transitions for state '{state}' but there are "
                f"only {n_symbols} symbols in alphabet. "
                "Expected transitions to be defined only for symbols in alphabet.",
                state,
            )

    def trace(self, text: str) -> tuple[str, ...]:
        """
        Run text and return every visited state, q0 first.

        Unlike execute, the final state is not checked against the accepted
        states.

        Raises:
            UnknownSymbolError: If a character of text is not in the alphabet.
        """
        state = self.initial_state
        visited = [state]
        for position, symbol in enumerate(text):
            if symbol not in self._alphabet_set:
                raise UnknownSymbolError(symbol, text, position, self.alphabet)
            state = self.transitions.execute(state, symbol)
            visited.append(state)
        return tuple(visited)

    def execute(self, text: str) -> str:
        """
        Run text from the initial state and return the final state.

        Each character of text is one symbol. Empty text leaves the
        machine in the initial state.

        Raises:
            UnknownSymbolError: If a character of text is not in the alphabet.
            RejectedInputError: If the final state is not an accepted state.
        """
        state = self.initial_state
        for position, symbol in enumerate(text):
            if symbol not in self._alphabet_set:
                raise UnknownSymbolError(symbol, text, position, self.alphabet)
            state = self.transitions.execute(state, symbol)

        if state not in self._accept_set:
            raise RejectedInputError(state, text)
        return state

    def accepts(self, text: str) -> bool:
        """True if execute(text) ends in an accepted state."""
        try:
            self.execute(text)
        except RejectedInputError:
            return False
        return True
