# taxi_sim/app/controllers/passengers.py
import logging

import numpy as np

from taxi_sim.app.protocols import ItemRegistry, PickupService
from taxi_sim.domain.entities.geography import Position
from taxi_sim.domain.entities.passenger import Passenger
from taxi_sim.io.business_events import PassengerCreatedBiz, PickupMissedBiz
from taxi_sim.io.recorder import Recorder
from taxi_sim.sim.clock import TickClock

log = logging.getLogger(__name__)

CREATION_PROBABILITY = 0.06


class PassengerGenerator:
    """
    Creates at most one passenger per tick and asks the dispatcher for a
    pickup. A passenger nobody can serve is counted as missed and dropped.
    """

    def __init__(
        self,
        city: ItemRegistry,
        company: PickupService,
        rng: np.random.Generator,
        *,
        creation_probability: float = CREATION_PROBABILITY,
        clock: TickClock | None = None,
        recorder: Recorder | None = None,
    ):
        if city is None:
            raise TypeError("city cannot be None")
        if company is None:
            raise TypeError("company cannot be None")
        if rng is None:
            raise TypeError("rng cannot be None")
        if not 0.0 <= creation_probability <= 1.0:
            raise ValueError(f"creation_probability must be in [0, 1], got {creation_probability}")
        if city.width * city.height < 2:
            raise ValueError(f"city must have at least 2 cells, got {city.width}x{city.height}")
        self.city = city
        self.company = company
        self.rng = rng
        self.creation_probability = creation_probability
        self.clock = clock or TickClock()
        self.recorder = recorder
        self.missed_pickups = 0
        self.total_created = 0

    def _random_position(self) -> Position:
        return Position(
            int(self.rng.integers(0, self.city.width)), int(self.rng.integers(0, self.city.height))
        )

    def create_passenger(self) -> Passenger:
        pickup = self._random_position()
        destination = self._random_position()
        while destination == pickup:
            destination = self._random_position()
        self.total_created += 1
        return Passenger(pickup, destination, id=self.total_created)

    def act(self) -> None:
        if self.rng.random() > self.creation_probability:
            return
        passenger = self.create_passenger()
        self._biz(
            PassengerCreatedBiz,
            passenger_id=passenger.id,
            pickup=passenger.pickup.as_tuple(),
            destination=passenger.destination.as_tuple(),
        )
        if self.company.request_pickup(passenger):
            self.city.add_item(passenger)
        else:
            self.missed_pickups += 1
            log.info("missed pickup for %s", passenger)
            self._biz(PickupMissedBiz, passenger_id=passenger.id)

    def _biz(self, cls, **kw):
        if self.recorder:
            self.recorder.emit(
                cls(run_id=self.recorder.run_id, t=self.clock.now, name=cls.__name__[:-3], **kw)
            )
