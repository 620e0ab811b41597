# domain/entities/passenger.py
from dataclasses import dataclass

from taxi_sim.domain.entities.geography import Position


@dataclass(frozen=True)
class Passenger:
    pickup: Position
    destination: Position
    id: int = 0

    def __post_init__(self):
        if self.pickup is None:
            raise TypeError("pickup location cannot be None")
        if self.destination is None:
            raise TypeError("destination location cannot be None")
        if self.pickup == self.destination:
            raise ValueError(f"pickup and destination cannot be the same: {self.pickup}")

    @property
    def location(self) -> Position:
        # a waiting passenger is drawn at the pickup point
        return self.pickup

    def __str__(self) -> str:
        return f"Passenger travelling from {self.pickup} to {self.destination}"
