# io/reporting.py
import logging
from dataclasses import asdict

from taxi_sim.domain.state import SimStats
from taxi_sim.sim.clock import TickClock

log = logging.getLogger(__name__)


def format_stats(s: SimStats) -> str:
    return (
        f"Passengers Collected: {s.pickups}  |  Passengers Dropped Off: {s.dropoffs}  |  "
        f"Passengers Missed: {s.missed}  |  Jobs Created: {s.created}  |  "
        f"Active Taxis: {s.active_vehicles}"
    )


class StatsReporter:
    """
    Headless stand-in for a renderer: snapshots the counters at the end of
    every tick and logs them every `every` ticks (0 = never). Read-only.
    """

    def __init__(self, *, company, generator, city, clock: TickClock, every: int = 0):
        self.company = company
        self.generator = generator
        self.city = city
        self.clock = clock
        self.every = every
        self.last: SimStats | None = None

    def snapshot(self) -> SimStats:
        return SimStats.collect(
            tick=self.clock.now, company=self.company, generator=self.generator, city=self.city
        )

    def act(self) -> None:
        self.last = self.snapshot()
        if self.every and self.last.tick % self.every == 0:
            log.info(format_stats(self.last), extra={"extra": {"stats": asdict(self.last)}})
