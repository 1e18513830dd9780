"""
Test RemainderMachine and the mod-3 factory.
"""

import dataclasses
import re
import time

import pytest

from pydfa.core.errors import (
    InvalidBinaryStringError,
    InvalidConfigurationError,
    InvalidModulusError,
)
from pydfa.machines.remainder import (
    MOD_THREE,
    RemainderMachine,
    _remainder_transitions,
    make_mod_three_machine,
)


class TestModulusValidation:
    """Modulus must be a positive int."""

    def test_zero_modulus(self):
        message = "Invalid modulus 0. Expected modulus to be greater than zero."
        with pytest.raises(InvalidModulusError, match=re.escape(message)) as excinfo:
            RemainderMachine(0)
        assert excinfo.value.modulus == 0

    def test_negative_modulus(self):
        message = "Invalid modulus -1. Expected modulus to be greater than zero."
        with pytest.raises(InvalidModulusError, match=re.escape(message)):
            RemainderMachine(-1)

    def test_invalid_modulus_is_configuration_error(self):
        with pytest.raises(InvalidConfigurationError):
            RemainderMachine(-7)

    @pytest.mark.parametrize("modulus", [3.0, "3", True, None])
    def test_non_int_modulus(self, modulus):
        with pytest.raises(TypeError, match="modulus must be int"):
            RemainderMachine(modulus)


class TestStructure:
    """Wrapped automaton layout."""

    def test_automaton_components(self):
        machine = RemainderMachine(4)
        automaton = machine.automaton
        assert machine.states == ("0", "1", "2", "3")
        assert automaton.alphabet == ("0", "1")
        assert automaton.initial_state == "0"
        assert automaton.accept_states == automaton.states

    def test_modulus_one(self):
        machine = RemainderMachine(1)
        assert machine.states == ("0",)
        assert machine.execute("1011") == 0

    @pytest.mark.parametrize("modulus", range(1, 26))
    def test_table_matches_shift_and_add(self, modulus):
        """Counter-built table equals δ(r, b) = (2r + b) mod N."""
        table = _remainder_transitions(modulus)
        assert table.states_count() == modulus
        for remainder in range(modulus):
            for bit in (0, 1):
                expected = str((2 * remainder + bit) % modulus)
                assert table.execute(str(remainder), str(bit)) == expected

    @pytest.mark.parametrize("modulus", range(1, 26))
    def test_generated_table_passes_validation(self, modulus):
        machine = RemainderMachine(modulus)
        assert len(machine.automaton.transitions) == 2 * modulus

    def test_is_frozen(self):
        machine = RemainderMachine(5)
        with pytest.raises(dataclasses.FrozenInstanceError):
            machine.modulus = 6

    def test_instances_are_independent(self):
        five = RemainderMachine(5)
        seven = RemainderMachine(7)
        assert five.automaton.transitions is not seven.automaton.transitions
        assert five.execute("1111") == 0
        assert seven.execute("1111") == 1

    def test_large_modulus_builds_quickly(self):
        """Construction is linear in the modulus."""
        modulus = 50_000
        start = time.perf_counter()
        machine = RemainderMachine(modulus)
        elapsed = time.perf_counter() - start

        assert elapsed < 10.0
        assert len(machine.states) == modulus
        binary = "1" * 64
        assert machine.execute(binary) == int(binary, 2) % modulus


class TestExecute:
    """execute on binary strings."""

    @pytest.mark.parametrize(
        "binary, expected",
        [("110", 1), ("1010", 0), ("1101", 3), ("1110", 4), ("1111", 0)],
    )
    def test_mod_five(self, binary, expected):
        assert RemainderMachine(5).execute(binary) == expected

    def test_empty_input_is_zero(self):
        for modulus in (1, 2, 5, 13):
            assert RemainderMachine(modulus).execute("") == 0

    def test_leading_zeros_ignored(self):
        machine = RemainderMachine(5)
        assert machine.execute("0001101") == machine.execute("1101")

    def test_large_input(self):
        machine = RemainderMachine(5)
        large = "1" * 100
        first = machine.execute(large)
        second = machine.execute(large)
        assert first == 0
        assert second == first

    @pytest.mark.parametrize(
        "binary",
        ["10031", "1b010", " ", "10 01", "2", "1\n"],
    )
    def test_invalid_binary_string(self, binary):
        message = f"Invalid binary string '{binary}'. Expected only '0' or '1' characters."
        with pytest.raises(InvalidBinaryStringError, match=re.escape(message)) as excinfo:
            RemainderMachine(5).execute(binary)
        assert excinfo.value.value == binary


class TestModThree:
    """make_mod_three_machine."""

    def test_returns_remainder_machine(self):
        machine = make_mod_three_machine()
        assert isinstance(machine, RemainderMachine)
        assert machine.modulus == MOD_THREE == 3
        assert machine == RemainderMachine(3)

    @pytest.mark.parametrize(
        "binary, expected",
        [("110", 0), ("1010", 1), ("1101", 1), ("1110", 2), ("1111", 0)],
    )
    def test_scenarios(self, binary, expected):
        assert make_mod_three_machine().execute(binary) == expected

    def test_transition_table(self):
        table = make_mod_three_machine().automaton.transitions
        assert dict(table.items()) == {
            ("0", "0"): "0",
            ("0", "1"): "1",
            ("1", "0"): "2",
            ("1", "1"): "0",
            ("2", "0"): "1",
            ("2", "1"): "2",
        }

    def test_invalid_input(self):
        with pytest.raises(InvalidBinaryStringError, match="'12'"):
            make_mod_three_machine().execute("12")
