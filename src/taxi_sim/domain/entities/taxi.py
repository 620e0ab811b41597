# domain/entities/taxi.py
import logging
from dataclasses import dataclass, field
from typing import Literal, Protocol

from taxi_sim.domain.entities.geography import Position
from taxi_sim.domain.entities.passenger import Passenger
from taxi_sim.domain.errors import VehicleStateError

log = logging.getLogger(__name__)

TaxiState = Literal["free", "to_pickup", "carrying"]


class Dispatch(Protocol):
    """Callbacks a taxi makes into the company operating it."""

    def arrived_at_pickup(self, vehicle: "Taxi") -> None: ...
    def arrived_at_destination(self, vehicle: "Taxi", passenger: Passenger) -> None: ...


# eq=False: taxis are keyed by identity in the dispatcher's assignment table
@dataclass(eq=False)
class Taxi:
    """
    A vehicle able to carry a single passenger.

    free       -> no target, nobody aboard
    to_pickup  -> target is a pickup point, nobody aboard
    carrying   -> target is the passenger's destination
    """

    id: int
    company: Dispatch
    location: Position
    target: Position | None = None
    passenger: Passenger | None = None
    idle_ticks: int = 0
    trips: int = field(default=0, repr=False)

    def __post_init__(self):
        if self.company is None:
            raise TypeError("company cannot be None")
        if self.location is None:
            raise TypeError("location cannot be None")

    @property
    def is_free(self) -> bool:
        return self.target is None and self.passenger is None

    @property
    def state(self) -> TaxiState:
        if self.passenger is not None:
            return "carrying"
        if self.target is not None:
            return "to_pickup"
        return "free"

    # ------------- commands from the dispatcher ---------------

    def set_pickup_location(self, location: Position) -> None:
        if location is None:
            raise TypeError("pickup location cannot be None")
        if not self.is_free:
            raise VehicleStateError(f"taxi {self.id} is {self.state}; cannot take a pickup")
        self.target = location

    def pickup(self, passenger: Passenger) -> None:
        if passenger is None:
            raise TypeError("passenger cannot be None")
        if self.passenger is not None:
            raise VehicleStateError(f"taxi {self.id} is already carrying {self.passenger}")
        self.passenger = passenger
        self.target = passenger.destination

    def offload_passenger(self) -> None:
        if self.passenger is None:
            raise VehicleStateError(f"taxi {self.id} has no passenger to offload")
        self.passenger = None
        self.target = None
        self.trips += 1

    # ------------- per-tick behaviour ---------------

    def act(self) -> None:
        if self.is_free:
            self.idle_ticks += 1
        target = self.target
        if target is None:
            return

        nxt = self.location.step(target)
        log.debug("taxi %s moving from %s to %s", self.id, self.location, nxt)
        self.location = nxt
        if nxt != target:
            return

        if self.passenger is not None:
            passenger = self.passenger
            log.debug("taxi %s arrived at destination %s", self.id, target)
            self.company.arrived_at_destination(self, passenger)
            self.offload_passenger()
        else:
            log.debug("taxi %s arrived at pickup %s", self.id, target)
            self.company.arrived_at_pickup(self)

    def __str__(self) -> str:
        return f"Taxi {self.id} at {self.location}"
