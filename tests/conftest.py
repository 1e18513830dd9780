"""
Pytest configuration and fixtures for pydfa tests.

Provides a reference three-state automaton and the shared binary corpus.
"""

import itertools

import pytest


def _all_bit_strings(max_length):
    strings = []
    for length in range(1, max_length + 1):
        strings.extend("".join(bits) for bits in itertools.product("01", repeat=length))
    return strings


# Every 1-5 bit string, longer mixed patterns, explicit leading zeros, and the
# empty string (value 0).
BINARY_CORPUS = (
    _all_bit_strings(5)
    + [
        "100101",
        "101101",
        "110101",
        "11111111",
        "100000000",
        "101010101",
        "1111101000",
        "10000000000",
        "10010010011",
        "000000000000",
        "111111111111",
    ]
    + ["0000", "0001", "00001", "00011", "00101"]
    + [""]
)


@pytest.fixture
def binary_corpus():
    return BINARY_CORPUS


@pytest.fixture
def three_state_table():
    """
    Transition table over Q={S0,S1,S2}, Σ={a,b}.

    S0 -a-> S2, S0 -b-> S1, S1 -a-> S0, S1 -b-> S1, S2 -a-> S1, S2 -b-> S0
    """
    from pydfa.core.transitions import TransitionTable

    table = TransitionTable()
    table.add_transition("S0", "a", "S2")
    table.add_transition("S0", "b", "S1")
    table.add_transition("S1", "a", "S0")
    table.add_transition("S1", "b", "S1")
    table.add_transition("S2", "a", "S1")
    table.add_transition("S2", "b", "S0")
    return table


@pytest.fixture
def three_state_automaton(three_state_table):
    """Automaton over three_state_table accepting S0 and S1."""
    from pydfa.core.automaton import Automaton

    return Automaton(
        states=["S0", "S1", "S2"],
        alphabet=["a", "b"],
        initial_state="S0",
        accept_states=["S0", "S1"],
        transitions=three_state_table,
    )
