from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator

from taxi_sim.sim.rng import DEFAULT_SEED


class SimModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    seed: int = DEFAULT_SEED
    ticks: int = 5000
    tick_delay_s: float = 0.0  # pacing for a live renderer only

    @field_validator("ticks", "tick_delay_s")
    @classmethod
    def _nonneg(cls, v, info: ValidationInfo):
        if v < 0:
            raise ValueError(f"{info.field_name} must be >= 0")
        return v


class CityModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    width: int = 35
    height: int = 35

    @field_validator("width", "height")
    @classmethod
    def _positive(cls, v: int, info: ValidationInfo) -> int:
        if v <= 0:
            raise ValueError(f"{info.field_name} must be > 0")
        return v

    @model_validator(mode="after")
    def _room_for_a_trip(self):
        # a trip needs a destination distinct from its pickup
        if self.width * self.height < 2:
            raise ValueError(f"city must have at least 2 cells, got {self.width}x{self.height}")
        return self


class FleetModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["taxi"] = "taxi"
    size: int = Field(default=3, ge=0)


class DemandModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    creation_probability: float = Field(default=0.06, ge=0.0, le=1.0)


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = Field(default=100, ge=1)
    report_every: int = Field(default=0, ge=0)  # 0 = no periodic stats lines


class ScenarioModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "taxiville"
    run_id: str = "local"
    sim: SimModel = Field(default_factory=SimModel)
    city: CityModel = Field(default_factory=CityModel)
    fleet: FleetModel = Field(default_factory=FleetModel)
    demand: DemandModel = Field(default_factory=DemandModel)
    log: LogModel = Field(default_factory=LogModel)
