"""
Error taxonomy for pydfa.

Two kinds of failure are kept apart:
- InvalidConfigurationError: the caller supplied a malformed automaton,
  modulus, or input (structural problems).
- RejectedInputError: automaton and input are well-formed, but the input
  ends in a non-accepting state.

RejectedInputError does not derive from InvalidConfigurationError, so
catching one never catches the other.
"""

from __future__ import annotations


class InvalidConfigurationError(ValueError):
    """Base class for structural errors (bad setup or bad input)."""


class InvalidAutomatonError(InvalidConfigurationError):
    """A five-tuple component failed validation at construction time."""

    def __init__(self, message: str, value: object = None) -> None:
        super().__init__(message)
        self.value = value


class InvalidTokenTypeError(InvalidAutomatonError, TypeError):
    """A state or symbol is not a str."""


class UnknownTransitionError(InvalidConfigurationError, LookupError):
    def __init__(self, state: str, symbol: str) -> None:
        super().__init__(
            f"Unknown transition with input state '{state}' and input symbol '{symbol}'."
        )
        self.state = state
        self.symbol = symbol


class UnknownSymbolError(InvalidConfigurationError):
    def __init__(
        self,
        symbol: str,
        text: str,
        position: int,
        alphabet: tuple[str, ...],
    ) -> None:
        super().__init__(
            f"Unknown symbol '{symbol}' within input '{text}' at position {position}. "
            f"Expected symbol to be found in alphabet: {', '.join(alphabet)}"
        )
        self.symbol = symbol
        self.input = text
        self.position = position


class InvalidModulusError(InvalidConfigurationError):
    def __init__(self, modulus: int) -> None:
        super().__init__(
            f"Invalid modulus {modulus}. Expected modulus to be greater than zero."
        )
        self.modulus = modulus


class InvalidBinaryStringError(InvalidConfigurationError):
    def __init__(self, value: str) -> None:
        super().__init__(
            f"Invalid binary string '{value}'. Expected only '0' or '1' characters."
        )
        self.value = value


class RejectedInputError(ValueError):
    """Input consumed completely but the final state is not accepting."""

    def __init__(self, state: str, text: str) -> None:
        super().__init__(
            f"Rejected final state '{state}' for input '{text}'. "
            "Expected final state to be found in list of accepted states."
        )
        self.state = state
        self.input = text
