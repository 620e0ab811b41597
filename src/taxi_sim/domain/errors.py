# domain/errors.py


class SimulationError(RuntimeError):
    """Base class for bookkeeping failures inside the simulation core."""


class VehicleStateError(SimulationError):
    """A vehicle was asked to do something its current state does not allow."""


class MissingPassengerError(SimulationError):
    """A vehicle reached a pickup point with no passenger assigned to it."""

    def __init__(self, vehicle):
        self.vehicle = vehicle
        super().__init__(f"missing passenger at pickup for {vehicle}")
