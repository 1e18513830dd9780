from __future__ import annotations

import logging
from dataclasses import dataclass, field

from pydfa.core.automaton import Automaton
from pydfa.core.binary import is_binary_string
from pydfa.core.errors import InvalidBinaryStringError, InvalidModulusError
from pydfa.core.transitions import TransitionTable

logger = logging.getLogger(__name__)

BINARY_ALPHABET = ("0", "1")
MOD_THREE = 3


def _remainder_states(modulus: int) -> tuple[str, ...]:
    return tuple(str(remainder) for remainder in range(modulus))


def _remainder_transitions(modulus: int) -> TransitionTable:
    """
    Transition table for r -> (2r + b) mod N.

    Visiting (r, b) as (0, 0), (0, 1), (1, 0), ..., (N-1, 1) enumerates
    2r + b = 0, 1, ..., 2N-1 in order, so the target is a counter that
    steps by one and wraps to 0 on reaching N.
    """
    table = TransitionTable()
    next_remainder = 0

    for remainder in range(modulus):
        for symbol in BINARY_ALPHABET:
            table.add_transition(str(remainder), symbol, str(next_remainder))
            next_remainder += 1
            if next_remainder == modulus:
                next_remainder = 0

    return table


@dataclass(frozen=True)
class RemainderMachine:
    """
    DFA computing the remainder of a binary number modulo `modulus`.

    States are the remainders "0" .. str(modulus - 1), all of them
    accepting. The remainder is tracked one bit at a time, so inputs of any
    length are supported without converting them to an integer.

    Examples:
        >>> machine = RemainderMachine(5)
        >>> machine.execute("1101")
        3
        >>> machine.execute("")
        0
    """

    modulus: int
    _automaton: Automaton = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if isinstance(self.modulus, bool) or not isinstance(self.modulus, int):
            raise TypeError(f"modulus must be int, got {type(self.modulus)}")
        if self.modulus <= 0:
            raise InvalidModulusError(self.modulus)

        states = _remainder_states(self.modulus)
        automaton = Automaton(
            states=states,
            alphabet=BINARY_ALPHABET,
            initial_state="0",
            accept_states=states,
            transitions=_remainder_transitions(self.modulus),
        )
        object.__setattr__(self, "_automaton", automaton)
        logger.debug("built remainder machine for modulus %d", self.modulus)

    @property
    def automaton(self) -> Automaton:
        return self._automaton

    @property
    def states(self) -> tuple[str, ...]:
        return self._automaton.states

    def execute(self, binary: str) -> int:
        """
        Return int(binary, 2) mod modulus, computed by running the DFA.

        Raises:
            InvalidBinaryStringError: If binary contains anything but '0' and '1'.
        """
        if not is_binary_string(binary):
            raise InvalidBinaryStringError(binary)

        return int(self._automaton.execute(binary))


def make_mod_three_machine() -> RemainderMachine:
    """Remainder machine with the modulus fixed to 3.

    Transition table:

        state | '0' | '1'
        ------+-----+-----
        '0'   | '0' | '1'
        '1'   | '2' | '0'
        '2'   | '1' | '2'
    """
    return RemainderMachine(MOD_THREE)
