"""
Configuration loader for YAML-based simulation setup.

Provides functions to build integrators and simulators from configuration
dictionaries or YAML files. The System itself (particles, masses, force
calculator) is supplied by the caller.
"""
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Union

import yaml

from pyverlet.integrator import Integrator, VelocityVerlet, Verlet
from pyverlet.observer import (
    EnergyObserver,
    Observer,
    PrintObserver,
    TrajectoryObserver,
)
from pyverlet.simulator import Simulator

from .schemas import IntegratorConfig, ObserverConfig, SimulationConfig

if TYPE_CHECKING:
    from pyverlet.core import System

INTEGRATORS = {
    "velocity_verlet": VelocityVerlet,
    "verlet": Verlet,
}


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load YAML configuration file.

    Args:
        path: Path to YAML file.

    Returns:
        Dictionary with configuration (empty for an empty file).
    """
    with open(path, "r") as f:
        return yaml.safe_load(f) or {}


def build_integrator(
    config: Union[Dict[str, Any], IntegratorConfig],
) -> Integrator:
    """
    Create an integrator from its configuration section.

    Args:
        config: ``{"type": ..., "dt": ...}`` or an IntegratorConfig.

    Returns:
        A new, unprepared integrator.

    Raises:
        ValueError: If the type is unknown or dt is not positive.
    """
    if not isinstance(config, IntegratorConfig):
        config = IntegratorConfig.model_validate(config)
    return INTEGRATORS[config.type](dt=config.dt)


def build_observers(
    config: Union[Dict[str, Any], ObserverConfig],
) -> List[Observer]:
    """Create the observers enabled in an ``observers`` section."""
    if not isinstance(config, ObserverConfig):
        config = ObserverConfig.model_validate(config)

    observers: List[Observer] = []
    if config.energy:
        observers.append(EnergyObserver(interval=config.energy_interval))
    if config.print:
        observers.append(PrintObserver(interval=config.print_interval))
    if config.trajectory:
        observers.append(TrajectoryObserver(interval=config.trajectory_interval))
    return observers


def build_simulation_from_config(
    config: Dict[str, Any],
    system: "System",
) -> Simulator:
    """
    Build a Simulator for ``system`` from a configuration dictionary.

    Args:
        config: Configuration dictionary (typically from YAML).
        system: The system to integrate.

    Returns:
        Configured Simulator ready to run.

    Example config:
        integrator:
          type: verlet
          dt: 0.005
        observers:
          energy: true
          energy_interval: 10
          print: false
        run:
          steps: 10000
    """
    parsed = SimulationConfig.model_validate(config)
    return Simulator(
        system=system,
        integrator=build_integrator(parsed.integrator),
        observers=build_observers(parsed.observers),
    )


def load_and_run(path: Union[str, Path], system: "System") -> Simulator:
    """
    Load configuration from YAML and run the simulation.

    Args:
        path: Path to YAML configuration file.
        system: The system to integrate.

    Returns:
        Simulator after run completes.
    """
    config = load_yaml(path)
    sim = build_simulation_from_config(config, system)
    sim.run(num_steps=SimulationConfig.model_validate(config).run.steps)
    return sim
