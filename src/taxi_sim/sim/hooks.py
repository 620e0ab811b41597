# sim/hooks.py
from typing import Protocol


class DriverHooks(Protocol):
    def run_start(self, *, ticks, actors): ...
    def run_end(self, *, ticks, last_tick, wall_ms): ...
    def tick_start(self, *, tick): ...
    def tick_end(self, *, tick, ms): ...
    def error(self, actor, *, tick: int, reason: str, exc: BaseException): ...


class NoopHooks:
    def run_start(self, **_):
        pass

    def run_end(self, **_):
        pass

    def tick_start(self, **_):
        pass

    def tick_end(self, **_):
        pass

    def error(self, *_, **__):
        pass
