"""Core DFA types: TransitionTable, Automaton and the error taxonomy."""

from pydfa.core.automaton import Automaton
from pydfa.core.binary import is_binary_string
from pydfa.core.errors import (
    InvalidAutomatonError,
    InvalidBinaryStringError,
    InvalidConfigurationError,
    InvalidModulusError,
    InvalidTokenTypeError,
    RejectedInputError,
    UnknownSymbolError,
    UnknownTransitionError,
)
from pydfa.core.transitions import TransitionTable

__all__ = [
    "Automaton",
    "InvalidAutomatonError",
    "InvalidBinaryStringError",
    "InvalidConfigurationError",
    "InvalidModulusError",
    "InvalidTokenTypeError",
    "RejectedInputError",
    "TransitionTable",
    "UnknownSymbolError",
    "UnknownTransitionError",
    "is_binary_string",
]
