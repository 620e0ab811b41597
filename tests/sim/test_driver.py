# tests/sim/test_driver.py
import pytest

from taxi_sim.sim.clock import TickClock
from taxi_sim.sim.driver import SimulationDriver
from taxi_sim.sim.hooks import NoopHooks


class Probe:
    def __init__(self, name, trace, clock=None):
        self.name, self.trace, self.clock = name, trace, clock

    def act(self):
        self.trace.append((self.clock.now if self.clock else None, self.name))


class Boom:
    def act(self):
        raise RuntimeError("boom")


# --- test hook that records lifecycle calls ---
class TraceHooks(NoopHooks):
    def __init__(self):
        self.calls = []

    def run_start(self, *, ticks, actors):
        self.calls.append(("run_start", ticks, actors))

    def tick_start(self, *, tick):
        self.calls.append(("tick", tick))

    def run_end(self, *, ticks, last_tick, wall_ms):
        self.calls.append(("run_end", ticks, last_tick))

    def error(self, actor, *, tick, reason, exc):
        self.calls.append(("error", tick, reason))


def test_actor_order_is_vehicles_generator_renderer():
    trace = []
    clock = TickClock()
    v1, v2 = Probe("v1", trace, clock), Probe("v2", trace, clock)
    gen, ren = Probe("gen", trace, clock), Probe("ren", trace, clock)
    d = SimulationDriver([v1, v2], gen, ren, clock=clock)
    assert d.actors == (v1, v2, gen, ren)

    d.step()
    d.step()
    assert trace == [
        (1, "v1"), (1, "v2"), (1, "gen"), (1, "ren"),
        (2, "v1"), (2, "v2"), (2, "gen"), (2, "ren"),
    ]  # fmt: skip


def test_renderer_is_optional():
    trace = []
    d = SimulationDriver([Probe("v", trace)], Probe("gen", trace))
    assert d.run(3) == 3
    assert d.now == 3
    assert [n for _, n in trace] == ["v", "gen"] * 3


def test_run_reports_lifecycle_to_hooks():
    hooks = TraceHooks()
    d = SimulationDriver([], Probe("gen", []), hooks=hooks)
    d.run(2)
    assert hooks.calls == [("run_start", 2, 1), ("tick", 1), ("tick", 2), ("run_end", 2, 2)]


def test_actor_errors_are_reported_then_raised():
    hooks = TraceHooks()
    trace = []
    d = SimulationDriver([Boom()], Probe("gen", trace), hooks=hooks)
    with pytest.raises(RuntimeError, match="boom"):
        d.step()
    assert ("error", 1, "RuntimeError") in hooks.calls
    assert trace == []  # generator never ran for the failed tick


def test_bad_arguments():
    d = SimulationDriver([], Probe("gen", []))
    with pytest.raises(ValueError):
        d.run(-1)
    with pytest.raises(ValueError):
        d.run(1, delay_s=-0.5)
    with pytest.raises(TypeError):
        SimulationDriver([], None)
    assert d.run(0) == 0 and d.now == 0


def test_clock_advances_one_tick_per_step():
    c = TickClock()
    d = SimulationDriver([], Probe("gen", []), clock=c)
    assert c.now == 0
    assert d.step() == 1 and c.now == 1
    d.run(2)
    assert c.now == 3
