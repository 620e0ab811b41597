# sim/driver.py
import time
from collections.abc import Iterable

from taxi_sim.app.protocols import Actor, Vehicle
from taxi_sim.sim.clock import TickClock
from taxi_sim.sim.hooks import DriverHooks, NoopHooks


class SimulationDriver:
    """
    Advances the simulation one tick at a time.

    The actor order is fixed when the driver is built and is part of its
    contract: every vehicle first (fleet order), then the passenger
    generator, then the renderer. A renderer therefore always sees the
    final state of the tick, and a request made by the generator is never
    served by a vehicle move within the same tick.
    """

    def __init__(
        self,
        vehicles: Iterable[Vehicle],
        generator: Actor,
        renderer: Actor | None = None,
        *,
        clock: TickClock | None = None,
        hooks: DriverHooks | None = None,
    ):
        if generator is None:
            raise TypeError("generator cannot be None")
        self.vehicles: tuple[Vehicle, ...] = tuple(vehicles)
        self.generator = generator
        self.renderer = renderer
        actors: list[Actor] = [*self.vehicles, generator]
        if renderer is not None:
            actors.append(renderer)
        self._actors = tuple(actors)
        self.clock = clock or TickClock()
        self._hooks = hooks or NoopHooks()

    @property
    def actors(self) -> tuple[Actor, ...]:
        return self._actors

    @property
    def now(self) -> int:
        return self.clock.now

    def step(self) -> int:
        tick = self.clock.advance()
        t0 = time.perf_counter()
        self._hooks.tick_start(tick=tick)
        for actor in self._actors:
            try:
                actor.act()
            except Exception as exc:
                self._hooks.error(actor, tick=tick, reason=type(exc).__name__, exc=exc)
                raise
        self._hooks.tick_end(tick=tick, ms=(time.perf_counter() - t0) * 1000)
        return tick

    def run(self, ticks: int, delay_s: float = 0.0) -> int:
        """Run `ticks` steps. `delay_s` only paces an attached renderer."""
        if ticks < 0:
            raise ValueError(f"ticks must be >= 0, got {ticks}")
        if delay_s < 0:
            raise ValueError(f"delay_s must be >= 0, got {delay_s}")
        t0 = time.perf_counter()
        self._hooks.run_start(ticks=ticks, actors=len(self._actors))
        for _ in range(ticks):
            self.step()
            if delay_s:
                time.sleep(delay_s)
        self._hooks.run_end(
            ticks=ticks, last_tick=self.clock.now, wall_ms=(time.perf_counter() - t0) * 1000
        )
        return ticks
