# taxi_sim/app/controllers/fleet.py
import numpy as np

from taxi_sim.app.controllers.dispatch import Dispatcher
from taxi_sim.app.protocols import ItemRegistry
from taxi_sim.domain.entities.geography import Position
from taxi_sim.domain.entities.taxi import Taxi

NUMBER_OF_TAXIS = 3


def spawn_location(city: ItemRegistry, rng: np.random.Generator) -> Position:
    return Position(int(rng.integers(0, city.width)), int(rng.integers(0, city.height)))


def spawn_fleet(
    company: Dispatcher,
    city: ItemRegistry,
    rng: np.random.Generator,
    size: int = NUMBER_OF_TAXIS,
) -> list[Taxi]:
    """Create `size` taxis at random cells, register them with company and city."""
    if size < 0:
        raise ValueError(f"fleet size must be >= 0, got {size}")
    taxis = []
    for i in range(size):
        taxi = Taxi(id=i + 1, company=company, location=spawn_location(city, rng))
        company.add_vehicle(taxi)
        city.add_item(taxi)
        taxis.append(taxi)
    return taxis
