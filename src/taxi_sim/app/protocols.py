from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

from taxi_sim.domain.entities.geography import Position
from taxi_sim.domain.entities.passenger import Passenger


@runtime_checkable
class Actor(Protocol):
    """Anything the simulation driver steps once per tick."""

    def act(self) -> None: ...


@runtime_checkable
class Vehicle(Actor, Protocol):
    """
    Responsibilities:
      • Move one grid step per tick towards its target, if it has one.
      • Report pickup / destination arrivals back to its dispatcher.
      • Accept pickup assignments only while free.
    Only the single-passenger Taxi implements this today; a multi-passenger
    shuttle would need a destination ordering policy first.
    """

    id: int
    location: Position
    target: Position | None
    idle_ticks: int

    @property
    def is_free(self) -> bool: ...
    def set_pickup_location(self, location: Position) -> None: ...
    def pickup(self, passenger: Passenger) -> None: ...
    def offload_passenger(self) -> None: ...


class PickupService(Protocol):
    def request_pickup(self, passenger: Passenger) -> bool: ...


@runtime_checkable
class ItemRegistry(Protocol):
    """
    Visible-item registry shared with rendering.
    `items()` returns a snapshot; mutating it does not touch the registry.
    """

    width: int
    height: int

    def add_item(self, item: Any) -> None: ...
    def remove_item(self, item: Any) -> None: ...
    def items(self) -> Sequence[Any]: ...
    def __contains__(self, item: Any) -> bool: ...
