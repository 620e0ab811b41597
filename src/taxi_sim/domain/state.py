# taxi_sim/domain/state.py
from dataclasses import dataclass

from taxi_sim.domain.entities.passenger import Passenger


@dataclass(frozen=True)
class SimStats:
    tick: int
    pickups: int
    dropoffs: int
    missed: int
    created: int
    active_vehicles: int
    idle_ticks: int
    waiting_passengers: int

    @classmethod
    def collect(cls, *, tick, company, generator, city) -> "SimStats":
        return cls(
            tick=tick,
            pickups=company.total_pickups,
            dropoffs=company.total_dropoffs,
            missed=generator.missed_pickups,
            created=generator.total_created,
            active_vehicles=company.active_vehicle_count,
            idle_ticks=company.total_idle_ticks,
            waiting_passengers=sum(1 for i in city.items() if isinstance(i, Passenger)),
        )
