"""
Builder module for configuration-driven setup.

Provides:
- IntegratorConfig, ObserverConfig, RunConfig, SimulationConfig: pydantic models
- load_yaml: Read a YAML configuration file
- build_integrator, build_observers, build_simulation_from_config: Factories
- load_and_run: Load a YAML file and run it on a system
"""

from .config_loader import (
    build_integrator,
    build_observers,
    build_simulation_from_config,
    load_and_run,
    load_yaml,
)
from .schemas import IntegratorConfig, ObserverConfig, RunConfig, SimulationConfig

__all__ = [
    "IntegratorConfig",
    "ObserverConfig",
    "RunConfig",
    "SimulationConfig",
    "load_yaml",
    "build_integrator",
    "build_observers",
    "build_simulation_from_config",
    "load_and_run",
]
