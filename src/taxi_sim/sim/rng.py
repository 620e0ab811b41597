# sim/rng.py
from __future__ import annotations

from dataclasses import dataclass
from functools import cache
from zlib import crc32

import numpy as np

# fixed seed so runs are repeatable
DEFAULT_SEED = 12345


def _u32(x: int) -> int:
    return int(x & 0xFFFFFFFF)


def _crc32_u32(s: str) -> int:
    return _u32(crc32(s.encode("utf-8")))


@dataclass(frozen=True)
class RNGKey:
    """Named stream; `tag` is the name hashed to u32 for seeding."""

    stream: str
    tag: int

    @classmethod
    def named(cls, stream: str) -> RNGKey:
        return cls(stream=stream, tag=_crc32_u32(stream))


class RNGRegistry:
    """
    Deterministic registry of numpy.random.Generator streams.
    Derivation path: [master_seed, scenario, key.tag]

    Each named stream is created once and then shared, so the draws a
    component sees depend only on the seed and on its own call order.
    """

    def __init__(self, master_seed: int = DEFAULT_SEED, *, scenario: str | int = 0):
        self.master_seed = _u32(master_seed)
        self.scenario_tag = _crc32_u32(str(scenario))

    @cache
    def generator(self, key: RNGKey) -> np.random.Generator:
        ss = np.random.SeedSequence(entropy=[self.master_seed, self.scenario_tag, key.tag])
        return np.random.Generator(np.random.PCG64(ss))

    def stream(self, name: str) -> np.random.Generator:
        return self.generator(RNGKey.named(name))
