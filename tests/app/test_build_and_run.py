# tests/app/test_build_and_run.py
import pytest
from pydantic import ValidationError

from taxi_sim.app.build import build
from taxi_sim.config.models import ScenarioModel
from taxi_sim.domain.entities.passenger import Passenger
from taxi_sim.domain.entities.taxi import Taxi
from taxi_sim.io.recorder import MemorySink, Recorder
from taxi_sim.io.reporting import format_stats


def _cfg(**sim):
    return {
        "name": "test",
        "run_id": "t-1",
        "sim": {"seed": 12345, "ticks": 300, **sim},
        "city": {"width": 20, "height": 20},
        "fleet": {"size": 3},
        "demand": {"creation_probability": 0.2},
    }


def test_default_scenario():
    m = ScenarioModel()
    assert (m.city.width, m.city.height) == (35, 35)
    assert m.fleet.size == 3
    assert m.demand.creation_probability == 0.06
    assert m.sim.seed == 12345 and m.sim.ticks == 5000


def test_build_runs_and_keeps_counters_consistent():
    sink = MemorySink()
    app = build(_cfg(), use_logging=False, recorder=Recorder(sink, run_id="t-1"))
    assert app.driver.actors == (*app.taxis, app.generator, app.reporter)
    assert all(t in app.city for t in app.taxis)

    stats = app.run()
    assert stats.tick == 300 == app.clock.now
    assert stats.created > 0
    assert stats.missed + app.company.total_assignments == stats.created
    assert stats.pickups >= stats.dropoffs
    assert stats.pickups == len(sink.named("PickupArrived"))
    assert stats.missed == len(sink.named("PickupMissed"))
    # waiting passengers are exactly the outstanding assignments
    waiting = [i for i in app.city.items() if isinstance(i, Passenger)]
    assert sorted(p.id for p in waiting) == sorted(p.id for p in app.company.assignments.values())
    assert stats.waiting_passengers == len(waiting)
    assert sum(isinstance(i, Taxi) for i in app.city.items()) == 3
    assert app.reporter.last == stats


def test_same_seed_reproduces_run():
    a = build(_cfg(), use_logging=False)
    b = build(_cfg(), use_logging=False)
    assert [t.location for t in a.taxis] == [t.location for t in b.taxis]
    assert a.run() == b.run()
    assert [t.location for t in a.taxis] == [t.location for t in b.taxis]


def test_different_seed_changes_run():
    a = build(_cfg(seed=1), use_logging=False).run()
    b = build(_cfg(seed=2), use_logging=False).run()
    assert a != b


def test_invalid_config_rejected():
    with pytest.raises(ValidationError):
        build({"sim": {"ticks": -1}}, use_logging=False)
    with pytest.raises(ValidationError):
        build({"city": {"width": 0}}, use_logging=False)
    with pytest.raises(ValidationError):
        build(
            {"city": {"width": 1, "height": 1}, "demand": {"creation_probability": 1.0}},
            use_logging=False,
        )
    with pytest.raises(ValidationError):
        build({"demand": {"creation_probability": 2.0}}, use_logging=False)
    with pytest.raises(ValidationError):
        build({"fleet": {"kind": "shuttle"}}, use_logging=False)
    with pytest.raises(ValidationError):
        build({"bogus": 1}, use_logging=False)


def test_status_line():
    stats = build(_cfg(), use_logging=False).run(50)
    line = format_stats(stats)
    assert line.startswith(f"Passengers Collected: {stats.pickups}")
    assert f"Active Taxis: {stats.active_vehicles}" in line
