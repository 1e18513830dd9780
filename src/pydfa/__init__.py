"""pydfa: deterministic finite automata and binary remainder machines."""

from pydfa.core import (
    Automaton,
    InvalidAutomatonError,
    InvalidBinaryStringError,
    InvalidConfigurationError,
    InvalidModulusError,
    InvalidTokenTypeError,
    RejectedInputError,
    TransitionTable,
    UnknownSymbolError,
    UnknownTransitionError,
    is_binary_string,
)
from pydfa.machines import RemainderMachine, make_mod_three_machine

__version__ = "0.1.0"

__all__ = [
    "Automaton",
    "InvalidAutomatonError",
    "InvalidBinaryStringError",
    "InvalidConfigurationError",
    "InvalidModulusError",
    "InvalidTokenTypeError",
    "RejectedInputError",
    "RemainderMachine",
    "TransitionTable",
    "UnknownSymbolError",
    "UnknownTransitionError",
    "is_binary_string",
    "make_mod_three_machine",
]
