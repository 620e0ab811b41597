# taxi_sim/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from taxi_sim.app.controllers.dispatch import Dispatcher
from taxi_sim.app.controllers.fleet import spawn_fleet
from taxi_sim.app.controllers.passengers import PassengerGenerator
from taxi_sim.config.models import ScenarioModel
from taxi_sim.domain.city import City
from taxi_sim.domain.entities.taxi import Taxi
from taxi_sim.domain.state import SimStats
from taxi_sim.io.recorder import Recorder
from taxi_sim.io.reporting import StatsReporter
from taxi_sim.io.sim_logging import SimLogging
from taxi_sim.sim.clock import TickClock
from taxi_sim.sim.driver import SimulationDriver
from taxi_sim.sim.hooks import NoopHooks
from taxi_sim.sim.rng import RNGRegistry


@dataclass
class App:
    model: ScenarioModel
    driver: SimulationDriver
    clock: TickClock
    rng: RNGRegistry
    city: City
    company: Dispatcher
    generator: PassengerGenerator
    reporter: StatsReporter
    taxis: list[Taxi]

    def run(self, ticks: int | None = None) -> SimStats:
        n = self.model.sim.ticks if ticks is None else ticks
        self.driver.run(n, delay_s=self.model.sim.tick_delay_s)
        return self.reporter.snapshot()


def build(
    cfg: ScenarioModel | Mapping | None = None,
    *,
    use_logging: bool = True,
    recorder: Recorder | None = None,
) -> App:
    # 0) Validate config
    if cfg is None:
        model = ScenarioModel()
    else:
        model = cfg if isinstance(cfg, ScenarioModel) else ScenarioModel.model_validate(cfg)

    # 1) Clock & RNG
    clock = TickClock()
    rng = RNGRegistry(model.sim.seed, scenario=model.name)

    hooks = (
        SimLogging(
            run_id=model.run_id,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
        )
        if use_logging
        else NoopHooks()
    )

    # 2) World, company & fleet
    city = City(model.city.width, model.city.height)
    company = Dispatcher(city, clock=clock, recorder=recorder)
    taxis = spawn_fleet(company, city, rng.stream("fleet"), size=model.fleet.size)

    # 3) Demand
    generator = PassengerGenerator(
        city,
        company,
        rng.stream("demand"),
        creation_probability=model.demand.creation_probability,
        clock=clock,
        recorder=recorder,
    )

    # 4) Renderer slot
    reporter = StatsReporter(
        company=company, generator=generator, city=city, clock=clock, every=model.log.report_every
    )

    # 5) Driver: vehicles -> generator -> renderer
    driver = SimulationDriver(taxis, generator, reporter, clock=clock, hooks=hooks)

    return App(model, driver, clock, rng, city, company, generator, reporter, taxis)
