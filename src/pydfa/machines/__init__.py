"""Machines built on top of Automaton."""

from pydfa.machines.remainder import (
    BINARY_ALPHABET,
    MOD_THREE,
    RemainderMachine,
    make_mod_three_machine,
)

__all__ = ["BINARY_ALPHABET", "MOD_THREE", "RemainderMachine", "make_mod_three_machine"]
