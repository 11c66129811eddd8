"""
Unit tests for ContainerShip.

Tests roster limits, removal, weight aggregation and reporting.
"""

import io
import math

import pytest

from cargoship.errors import (
    CapacityExceededError,
    ShipParameterError,
    WeightExceededError,
)
from cargoship.ship import ContainerShip


class TestShipConstruction:
    """Tests for ship parameter validation."""

    def test_basic_creation(self, ocean_carrier):
        assert ocean_carrier.name == "Ocean Carrier"
        assert ocean_carrier.max_speed == 20.0
        assert ocean_carrier.max_containers == 5
        assert ocean_carrier.max_weight == 50000.0
        assert ocean_carrier.container_count == 0
        assert ocean_carrier.total_weight() == 0

    @pytest.mark.parametrize("max_containers", [-1, 2.5, True])
    def test_invalid_max_containers(self, max_containers):
        with pytest.raises(ShipParameterError, match="max_containers"):
            ContainerShip("S", 10, max_containers, 1000)

    @pytest.mark.parametrize("max_weight", [0, -5, math.nan, math.inf, True])
    def test_invalid_max_weight(self, max_weight):
        with pytest.raises(ShipParameterError, match="max_weight"):
            ContainerShip("S", 10, 3, max_weight)

    @pytest.mark.parametrize("max_speed", [-1, math.nan, math.inf, True, "fast"])
    def test_invalid_speed(self, max_speed):
        """Test speed must be a finite non-negative number."""
        with pytest.raises(ShipParameterError, match="max_speed"):
            ContainerShip("S", max_speed, 3, 1000)

    def test_zero_speed_reports(self):
        """Test a moored ship (speed 0) still produces a report."""
        ship = ContainerShip("Hulk", 0, 3, 1000)
        stream = io.StringIO()
        ship.print_ship_info(stream)
        assert "Speed: 0 kn" in stream.getvalue()


class TestAddContainer:
    """Tests for add_container limits."""

    def test_add_success(self, ocean_carrier, factory):
        container = factory.create_cooled(80, 15)
        result = ocean_carrier.add_container(container)
        assert result.success
        assert result.data == 1
        assert ocean_carrier.containers == (container,)

    def test_count_limit(self, factory):
        """Test a full ship rejects another container and keeps its roster."""
        ship = ContainerShip("Small", 10, max_containers=2, max_weight=10000)
        ship.add_container(factory.create_cooled(10, 1))
        ship.add_container(factory.create_cooled(10, 1))
        before = ship.containers

        result = ship.add_container(factory.create_cooled(10, 1))

        assert not result.success
        assert isinstance(result.error, CapacityExceededError)
        assert ship.containers == before

    def test_zero_slot_ship(self, factory):
        ship = ContainerShip("Tug", 10, max_containers=0, max_weight=100)
        result = ship.add_container(factory.create_gas(10, 1))
        assert isinstance(result.error, CapacityExceededError)

    def test_weight_limit(self, factory):
        """Test a container that would pass max_weight is rejected."""
        ship = ContainerShip("Light", 10, max_containers=5, max_weight=100)
        first = factory.create_cooled(80, 20)
        first.load(50)
        ship.add_container(first)

        second = factory.create_cooled(80, 20)
        second.load(11)
        result = ship.add_container(second)

        assert isinstance(result.error, WeightExceededError)
        assert result.error.details["projected_weight"] == 101.0
        assert ship.containers == (first,)

    def test_weight_exactly_at_limit(self, factory):
        """Test reaching max_weight exactly is allowed."""
        ship = ContainerShip("Light", 10, max_containers=5, max_weight=100)
        container = factory.create_cooled(90, 10)
        container.load(90)
        assert ship.add_container(container).success
        assert ship.remaining_weight == 0.0

    def test_count_checked_before_weight(self, factory):
        """Test a full ship reports capacity even when weight also fails."""
        ship = ContainerShip("Small", 10, max_containers=1, max_weight=20)
        ship.add_container(factory.create_cooled(10, 10))
        result = ship.add_container(factory.create_cooled(10, 50))
        assert isinstance(result.error, CapacityExceededError)

    def test_ship_holds_reference(self, ocean_carrier, factory):
        """Test loads after boarding are visible through the ship."""
        container = factory.create_liquid(100, 10)
        ocean_carrier.add_container(container)
        container.load(30)
        assert ocean_carrier.get_container("KON-L-1") is container
        assert ocean_carrier.total_weight() == 40.0

    def test_post_insertion_load_not_rechecked(self, factory):
        """Test loading on board can leave the ship overweight."""
        ship = ContainerShip("Light", 10, max_containers=5, max_weight=50)
        container = factory.create_cooled(100, 10)
        assert ship.add_container(container).success

        assert container.load(60).success

        assert ship.total_weight() == 70.0
        assert ship.is_overweight
        assert ship.container_count == 1


class TestRemoveContainer:
    """Tests for remove_container."""

    def test_remove_present(self, ocean_carrier, factory):
        container = factory.create_gas(50, 5)
        ocean_carrier.add_container(container)
        result = ocean_carrier.remove_container("KON-G-1")
        assert result.success
        assert result.data == 1
        assert ocean_carrier.container_count == 0
        assert "KON-G-1" not in ocean_carrier

    def test_remove_absent_is_noop(self, ocean_carrier, factory):
        """Test removing an unknown id changes nothing and does not fail."""
        ocean_carrier.add_container(factory.create_gas(50, 5))
        before = ocean_carrier.containers
        result = ocean_carrier.remove_container("KON-X-99")
        assert result.success
        assert result.data == 0
        assert ocean_carrier.containers == before

    def test_remove_all_matching(self, ocean_carrier, factory):
        """Test every entry with the id is removed."""
        container = factory.create_gas(50, 5)
        other = factory.create_gas(50, 5)
        ocean_carrier.add_container(container)
        ocean_carrier.add_container(other)
        ocean_carrier.add_container(container)
        result = ocean_carrier.remove_container(container.container_id)
        assert result.data == 2
        assert ocean_carrier.containers == (other,)

    def test_removed_container_keeps_state(self, ocean_carrier, factory):
        container = factory.create_liquid(100, 10)
        ocean_carrier.add_container(container)
        container.load(40)
        ocean_carrier.remove_container(container.container_id)
        assert container.current_load == 40.0
        assert container.container_id == "KON-L-1"

    def test_order_preserved(self, ocean_carrier, factory):
        a = factory.create_liquid(100, 10)
        b = factory.create_gas(50, 5)
        c = factory.create_cooled(80, 15)
        for container in (a, b, c):
            ocean_carrier.add_container(container)
        ocean_carrier.remove_container(b.container_id)
        assert [x.container_id for x in ocean_carrier.containers] == ["KON-L-1", "KON-C-1"]


class TestShipQueries:
    """Tests for derived values and output."""

    def test_remaining_slots(self, ocean_carrier, factory):
        ocean_carrier.add_container(factory.create_gas(50, 5))
        assert ocean_carrier.remaining_slots == 4
        assert len(ocean_carrier) == 1

    def test_containers_is_snapshot(self, ocean_carrier, factory):
        """Test the returned roster cannot change the ship."""
        ocean_carrier.add_container(factory.create_gas(50, 5))
        roster = ocean_carrier.containers
        assert isinstance(roster, tuple)
        ocean_carrier.remove_container("KON-G-1")
        assert len(roster) == 1

    def test_to_dict(self, ocean_carrier, factory):
        container = factory.create_cooled(80, 15)
        container.load(60)
        ocean_carrier.add_container(container)
        d = ocean_carrier.to_dict()
        assert d["name"] == "Ocean Carrier"
        assert d["total_weight"] == 75.0
        assert d["containers"][0]["container_id"] == "KON-C-1"

    def test_print_ship_info(self, ocean_carrier, factory):
        """Test printed info reflects the live roster."""
        container = factory.create_liquid(100, 10, is_dangerous=True)
        ocean_carrier.add_container(container)
        container.load(40)
        stream = io.StringIO()
        ocean_carrier.print_ship_info(stream)
        text = stream.getvalue()
        assert "Ocean Carrier" in text
        assert "20 kn" in text
        assert "1/5" in text
        assert "50/50000 kg" in text
        assert "KON-L-1 (liquid), Loaded: 40/100 kg" in text
