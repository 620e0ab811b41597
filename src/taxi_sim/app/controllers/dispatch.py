# taxi_sim/app/controllers/dispatch.py
import logging
from types import MappingProxyType

from taxi_sim.app.protocols import ItemRegistry, Vehicle
from taxi_sim.domain.entities.passenger import Passenger
from taxi_sim.domain.errors import MissingPassengerError
from taxi_sim.io.business_events import DropoffArrivedBiz, PickupArrivedBiz, TripAssignedBiz
from taxi_sim.io.recorder import Recorder
from taxi_sim.sim.clock import TickClock

log = logging.getLogger(__name__)


class Dispatcher:
    """
    The taxi company: owns the fleet and assigns free vehicles to pickups.

    Invariant: a vehicle is a key of the assignment table only while it is
    driving to a pickup point and has not collected the passenger yet.
    """

    def __init__(
        self,
        city: ItemRegistry,
        *,
        clock: TickClock | None = None,
        recorder: Recorder | None = None,
    ):
        if city is None:
            raise TypeError("city cannot be None")
        self.city = city
        self.clock = clock or TickClock()
        self.recorder = recorder
        self._vehicles: list[Vehicle] = []
        self._assignments: dict[Vehicle, Passenger] = {}
        self._pickups = 0
        self._dropoffs = 0
        self._assignments_made = 0

    def _biz(self, cls, **kw):
        if self.recorder:
            self.recorder.emit(
                cls(run_id=self.recorder.run_id, t=self.clock.now, name=cls.__name__[:-3], **kw)
            )

    # ------------- fleet ---------------

    def add_vehicle(self, vehicle: Vehicle) -> None:
        if vehicle is None:
            raise TypeError("vehicle cannot be None")
        self._vehicles.append(vehicle)

    @property
    def vehicles(self) -> tuple[Vehicle, ...]:
        return tuple(self._vehicles)

    @property
    def assignments(self) -> MappingProxyType:
        return MappingProxyType(self._assignments)

    @property
    def total_pickups(self) -> int:
        return self._pickups

    @property
    def total_dropoffs(self) -> int:
        return self._dropoffs

    @property
    def total_assignments(self) -> int:
        return self._assignments_made

    @property
    def active_vehicle_count(self) -> int:
        return sum(1 for v in self._vehicles if not v.is_free)

    @property
    def total_idle_ticks(self) -> int:
        return sum(v.idle_ticks for v in self._vehicles)

    def _schedule_vehicle(self) -> Vehicle | None:
        # first free vehicle in fleet order
        for v in self._vehicles:
            if v.is_free:
                return v
        return None

    # ------------- requests & arrivals ---------------

    def request_pickup(self, passenger: Passenger) -> bool:
        """Assign the first free vehicle; False (and nothing recorded) if none is free."""
        if passenger is None:
            raise TypeError("passenger cannot be None")
        vehicle = self._schedule_vehicle()
        if vehicle is None:
            return False
        vehicle.set_pickup_location(passenger.pickup)
        self._assignments[vehicle] = passenger
        self._assignments_made += 1
        log.debug("assigned %s to %s", vehicle, passenger)
        self._biz(
            TripAssignedBiz,
            passenger_id=passenger.id,
            taxi_id=vehicle.id,
            distance=vehicle.location.distance(passenger.pickup),
        )
        return True

    def arrived_at_pickup(self, vehicle: Vehicle) -> None:
        if vehicle is None:
            raise TypeError("vehicle cannot be None")
        passenger = self._assignments.get(vehicle)
        if passenger is None:
            raise MissingPassengerError(vehicle)
        vehicle.pickup(passenger)
        # the entry goes only once the passenger is aboard
        del self._assignments[vehicle]
        if passenger in self.city:
            self.city.remove_item(passenger)
        self._pickups += 1
        self._biz(PickupArrivedBiz, passenger_id=passenger.id, taxi_id=vehicle.id)

    def arrived_at_destination(self, vehicle: Vehicle, passenger: Passenger) -> None:
        if vehicle is None:
            raise TypeError("vehicle cannot be None")
        if passenger is None:
            raise TypeError("passenger cannot be None")
        self._dropoffs += 1
        self._biz(DropoffArrivedBiz, passenger_id=passenger.id, taxi_id=vehicle.id)
