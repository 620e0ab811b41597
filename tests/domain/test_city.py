import pytest

from taxi_sim.domain.city import City
from taxi_sim.domain.entities.geography import Position
from taxi_sim.domain.entities.passenger import Passenger


def test_items_snapshot_and_removal_by_identity():
    city = City(10, 10)
    p1 = Passenger(Position(0, 0), Position(1, 1))
    p2 = Passenger(Position(0, 0), Position(1, 1))  # equal value, different object
    city.add_item(p1)
    city.add_item(p2)
    snap = city.items()
    city.remove_item(p2)
    assert snap == (p1, p2)
    assert city.items()[0] is p1 and len(city) == 1
    assert p1 in city and p2 not in city


def test_bad_registry_use_rejected():
    city = City(5, 5)
    p = Passenger(Position(0, 0), Position(1, 1))
    with pytest.raises(ValueError):
        city.remove_item(p)
    city.add_item(p)
    with pytest.raises(ValueError):
        city.add_item(p)
    with pytest.raises(ValueError):
        City(0, 5)
