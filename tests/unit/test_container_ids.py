"""
Unit tests for container id sequencing.
"""

import pytest

from cargoship.containers import (
    ContainerFactory,
    ContainerIdSequence,
    ContainerKind,
    ContainerPolicy,
)
from cargoship.errors import ContainerParameterError


class TestContainerKind:
    """Tests for ContainerKind enum."""

    def test_type_codes(self):
        """Test each kind maps to its id code."""
        assert ContainerKind.LIQUID.type_code == "L"
        assert ContainerKind.GAS.type_code == "G"
        assert ContainerKind.COOLED.type_code == "C"

    def test_values(self):
        assert ContainerKind.LIQUID.value == "liquid"
        assert ContainerKind.GAS.value == "gas"
        assert ContainerKind.COOLED.value == "cooled"


class TestContainerIdSequence:
    """Tests for ContainerIdSequence."""

    def test_starts_at_one(self):
        sequence = ContainerIdSequence()
        assert sequence.next_id(ContainerKind.LIQUID) == "KON-L-1"

    def test_counters_are_per_type(self):
        """Test each type code counts on its own."""
        sequence = ContainerIdSequence()
        assert sequence.next_id(ContainerKind.LIQUID) == "KON-L-1"
        assert sequence.next_id(ContainerKind.LIQUID) == "KON-L-2"
        assert sequence.next_id(ContainerKind.GAS) == "KON-G-1"
        assert sequence.next_id(ContainerKind.COOLED) == "KON-C-1"
        assert sequence.next_id(ContainerKind.LIQUID) == "KON-L-3"

    def test_peek_and_issued(self):
        sequence = ContainerIdSequence()
        sequence.next_id(ContainerKind.GAS)
        assert sequence.issued(ContainerKind.GAS) == 1
        assert sequence.peek(ContainerKind.GAS) == 2
        assert sequence.issued(ContainerKind.COOLED) == 0

    def test_reset_single_kind(self):
        """Test resetting one kind leaves others alone."""
        sequence = ContainerIdSequence()
        sequence.next_id(ContainerKind.LIQUID)
        sequence.next_id(ContainerKind.GAS)
        sequence.reset(ContainerKind.LIQUID)
        assert sequence.next_id(ContainerKind.LIQUID) == "KON-L-1"
        assert sequence.next_id(ContainerKind.GAS) == "KON-G-2"

    def test_reset_all(self):
        sequence = ContainerIdSequence()
        sequence.next_id(ContainerKind.LIQUID)
        sequence.next_id(ContainerKind.GAS)
        sequence.reset()
        assert sequence.next_id(ContainerKind.LIQUID) == "KON-L-1"
        assert sequence.next_id(ContainerKind.GAS) == "KON-G-1"

    def test_custom_prefix(self):
        sequence = ContainerIdSequence(prefix="BOX")
        assert sequence.next_id(ContainerKind.COOLED) == "BOX-C-1"


class TestFactoryIds:
    """Tests for ids issued through ContainerFactory."""

    def test_sequential_ids(self, factory):
        """Test L-1, L-2 then an independent G-1."""
        first = factory.create_liquid(100, 10)
        second = factory.create_liquid(100, 10)
        gas = factory.create_gas(50, 5)
        assert first.container_id == "KON-L-1"
        assert second.container_id == "KON-L-2"
        assert gas.container_id == "KON-G-1"

    def test_factories_are_independent(self):
        """Test two factories number their containers separately."""
        a = ContainerFactory()
        b = ContainerFactory()
        assert a.create_cooled(10, 1).container_id == "KON-C-1"
        assert b.create_cooled(10, 1).container_id == "KON-C-1"

    def test_shared_sequence(self):
        """Test factories can share one sequence."""
        sequence = ContainerIdSequence()
        a = ContainerFactory(sequence=sequence)
        b = ContainerFactory(sequence=sequence)
        a.create_gas(10, 1)
        assert b.create_gas(10, 1).container_id == "KON-G-2"

    def test_rejected_construction_keeps_sequence(self, factory):
        """Test invalid parameters do not consume an id."""
        with pytest.raises(ContainerParameterError):
            factory.create_liquid(0, 10)
        assert factory.create_liquid(100, 10).container_id == "KON-L-1"

    def test_prefix_from_policy(self):
        factory = ContainerFactory(policy=ContainerPolicy(id_prefix="CNT"))
        assert factory.create_gas(10, 1).container_id == "CNT-G-1"

    def test_next_id_preview(self, factory):
        factory.create_liquid(100, 10)
        assert factory.next_id_preview(ContainerKind.LIQUID) == "KON-L-2"
        assert factory.next_id_preview(ContainerKind.GAS) == "KON-G-1"
