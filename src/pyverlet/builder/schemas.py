"""
Pydantic models for integrator and simulation configuration.

All validation, field constraints, and defaults for configuration
dictionaries (typically loaded from YAML) live here.
"""
from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

INTEGRATOR_ALIASES = {
    "velocity_verlet": "velocity_verlet",
    "velocity-verlet": "velocity_verlet",
    "vv": "velocity_verlet",
    "verlet": "verlet",
}


class IntegratorConfig(BaseModel):
    """``integrator`` section."""

    type: str = Field(
        "velocity_verlet",
        description="Integration scheme (velocity_verlet, verlet)",
    )
    dt: float = Field(0.005, gt=0, description="Time step")

    @field_validator("type")
    @classmethod
    def type_must_be_known(cls, v: str) -> str:
        key = v.strip().lower()
        if key not in INTEGRATOR_ALIASES:
            allowed = sorted(set(INTEGRATOR_ALIASES.values()))
            raise ValueError(
                f"Unknown integrator '{v}'. Choose from: {', '.join(allowed)}"
            )
        return INTEGRATOR_ALIASES[key]


class ObserverConfig(BaseModel):
    """``observers`` section."""

    energy: bool = True
    energy_interval: int = Field(100, ge=1)
    print: bool = True
    print_interval: int = Field(1000, ge=1)
    trajectory: bool = False
    trajectory_interval: int = Field(100, ge=1)


class RunConfig(BaseModel):
    """``run`` section."""

    steps: int = Field(1000, ge=0, description="Number of integration steps")


class SimulationConfig(BaseModel):
    """Top-level configuration document."""

    integrator: IntegratorConfig = Field(default_factory=IntegratorConfig)
    observers: ObserverConfig = Field(default_factory=ObserverConfig)
    run: RunConfig = Field(default_factory=RunConfig)
