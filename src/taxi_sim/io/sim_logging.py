# io/sim_logging.py
import json
import logging
import sys

from taxi_sim.sim.hooks import NoopHooks


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload, default=str)


def default_json_logger(name="taxi_sim", level="INFO", stream=None) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(stream or sys.stdout)
        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
    logger.setLevel(level)
    return logger


class SimLogging(NoopHooks):
    """
    Structured logs for the driver lifecycle.
    Tick records are DEBUG and only every `sample_every` ticks.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 100,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.log = logger or default_json_logger(level=level)

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id, **extra}
        self.log.log(getattr(logging, level), msg, extra={"extra": payload})

    # --------------- driver lifecycle -----------------------------

    def run_start(self, *, ticks: int, actors: int):
        self._emit("INFO", "run_start", ticks=ticks, actors=actors)

    def run_end(self, *, ticks: int, **extra):
        self._emit("INFO", "run_end", ticks=ticks, **extra)

    def tick_end(self, *, tick: int, ms: float):
        if self.debug and tick % self.sample_every == 0:
            self._emit("DEBUG", "tick", t=tick, ms=round(ms, 3))

    def error(self, actor, *, tick: int, reason: str, exc: BaseException):
        self._emit("ERROR", "sim_error", t=tick, actor=str(actor), reason=reason, error=str(exc))
