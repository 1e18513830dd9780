from __future__ import annotations

from typing import Iterable

import numpy as np

from pydfa.core.automaton import Automaton


def transition_matrix(automaton: Automaton) -> np.ndarray:
    """
    Dense index form of the transition function.

    Rows follow automaton.states, columns follow automaton.alphabet; entry
    [i, j] is the index in automaton.states of δ(states[i], alphabet[j]).

    Returns:
        int64 array of shape (n_states, n_symbols).
    """
    state_to_idx = {state: idx for idx, state in enumerate(automaton.states)}
    matrix = np.zeros((len(automaton.states), len(automaton.alphabet)), dtype=np.int64)

    for i, state in enumerate(automaton.states):
        for j, symbol in enumerate(automaton.alphabet):
            matrix[i, j] = state_to_idx[automaton.transitions.execute(state, symbol)]

    return matrix


def reachable_states(automaton: Automaton) -> tuple[str, ...]:
    """States reachable from the initial state, in automaton.states order."""
    matrix = transition_matrix(automaton)
    reached = np.zeros(len(automaton.states), dtype=bool)
    reached[automaton.states.index(automaton.initial_state)] = True

    frontier = reached.copy()
    while frontier.any():
        targets = np.zeros_like(reached)
        targets[matrix[frontier].ravel()] = True
        frontier = targets & ~reached
        reached |= frontier

    return tuple(state for state, hit in zip(automaton.states, reached) if hit)


def final_state_counts(automaton: Automaton, inputs: Iterable[str]) -> dict[str, int]:
    """
    Count how many inputs end in each state.

    Rejected inputs are counted under their final state as well. Every state
    of the automaton appears in the result, possibly with a zero count.
    """
    state_to_idx = {state: idx for idx, state in enumerate(automaton.states)}
    final_indices = [state_to_idx[automaton.trace(text)[-1]] for text in inputs]

    counts = np.bincount(
        np.asarray(final_indices, dtype=np.int64),
        minlength=len(automaton.states),
    )
    return {state: int(count) for state, count in zip(automaton.states, counts)}
