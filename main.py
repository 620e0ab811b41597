# main.py
import argparse
import json

from taxi_sim.app.build import build
from taxi_sim.config.models import ScenarioModel
from taxi_sim.io.reporting import format_stats


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Run the taxi dispatch simulation")
    p.add_argument("--config", help="scenario JSON file")
    p.add_argument("--ticks", type=int, help="number of ticks to run")
    p.add_argument("--seed", type=int, help="master RNG seed")
    p.add_argument("--delay", type=float, help="seconds to wait between ticks")
    p.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args(argv)


def load_model(args) -> ScenarioModel:
    raw: dict = {}
    if args.config:
        with open(args.config, encoding="utf-8") as fp:
            raw = json.load(fp)
    model = ScenarioModel.model_validate(raw)
    sim = {}
    if args.ticks is not None:
        sim["ticks"] = args.ticks
    if args.seed is not None:
        sim["seed"] = args.seed
    if args.delay is not None:
        sim["tick_delay_s"] = args.delay
    update: dict = {}
    if sim:
        update["sim"] = model.sim.model_copy(update=sim)
    if args.log_level:
        update["log"] = model.log.model_copy(update={"level": args.log_level})
    # re-validate so command-line overrides get the same checks as the file
    return ScenarioModel.model_validate(model.model_copy(update=update).model_dump())


def run(argv=None):
    app = build(load_model(parse_args(argv)))
    stats = app.run()
    print(format_stats(stats))
    return stats


if __name__ == "__main__":
    run()
