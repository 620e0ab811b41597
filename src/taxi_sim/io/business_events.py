# taxi_sim/io/business_events.py

from dataclasses import dataclass


# Base type for analytics events; they never drive the simulation
@dataclass
class BizEvent:
    run_id: str
    t: int  # simulation tick
    name: str  # stable event name


@dataclass
class PassengerCreatedBiz(BizEvent):
    passenger_id: int
    pickup: tuple[int, int]
    destination: tuple[int, int]


@dataclass
class TripAssignedBiz(BizEvent):
    passenger_id: int
    taxi_id: int
    distance: int  # ticks from the taxi to the pickup point


@dataclass
class PickupMissedBiz(BizEvent):
    passenger_id: int


@dataclass
class PickupArrivedBiz(BizEvent):
    passenger_id: int
    taxi_id: int


@dataclass
class DropoffArrivedBiz(BizEvent):
    passenger_id: int
    taxi_id: int
