"""
Observer module for monitoring simulation progress.

Provides the Observer pattern for logging, trajectory output,
and property calculations during simulation.
"""
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, List

if TYPE_CHECKING:
    from pyverlet.core import System


class Observer(ABC):
    """
    Abstract base for simulation observers (Observer Pattern).

    Observers are notified at each step to record properties,
    write trajectories, or print progress.

    Attributes:
        interval: How often to call observe() (in steps).

    Example:
        >>> observer = EnergyObserver(interval=100)
        >>> if step % observer.interval == 0:
        ...     observer.observe(system, step)
    """

    def __init__(self, interval: int = 1) -> None:
        """
        Initialize observer.

        Args:
            interval: Observation interval in steps. Default=1 (every step).
        """
        if interval < 1:
            raise ValueError(f"Interval must be >= 1, got {interval}")
        self.interval = interval

    @abstractmethod
    def observe(self, system: "System", step: int) -> None:
        """
        Record observation.

        Args:
            system: Current system state.
            step: Current step number.
        """
        pass

    def finalize(self) -> None:
        """Called at end of simulation for cleanup."""
        pass

    @abstractmethod
    def get_name(self) -> str:
        """Get observer name."""
        pass


class CompositeObserver(Observer):
    """
    Composite observer that wraps multiple observers.

    Delegates to child observers based on their individual intervals.
    """

    def __init__(self, observers: List[Observer]) -> None:
        super().__init__(interval=1)  # Check every step
        self.observers = observers

    def observe(self, system: "System", step: int) -> None:
        """Delegate to child observers based on their intervals."""
        for obs in self.observers:
            if step % obs.interval == 0:
                obs.observe(system, step)

    def finalize(self) -> None:
        """Finalize all child observers."""
        for obs in self.observers:
            obs.finalize()

    def get_name(self) -> str:
        """Return composite name."""
        names = [o.get_name() for o in self.observers]
        return f"Composite[{', '.join(names)}]"


class EnergyObserver(Observer):
    """
    Records kinetic energy and temperature during simulation.

    Temperature is recorded as NaN for systems with fewer than two
    particles.
    """

    def __init__(self, interval: int = 1) -> None:
        """Initialize energy observer."""
        super().__init__(interval)
        self.steps: List[int] = []
        self.times: List[float] = []
        self.kinetic_energies: List[float] = []
        self.temperatures: List[float] = []

    def observe(self, system: "System", step: int) -> None:
        """Record energy values."""
        kinetic = system.compute_kinetic_energy()
        if system.n_particles >= 2:
            temperature = system.compute_temperature()
        else:
            temperature = float("nan")

        self.steps.append(step)
        self.times.append(system.time)
        self.kinetic_energies.append(kinetic)
        self.temperatures.append(temperature)

    def get_name(self) -> str:
        """Return observer name."""
        return f"EnergyObserver(interval={self.interval})"

    def get_kinetic_drift(self) -> float:
        """
        Compute relative kinetic energy drift.

        Only meaningful for force-free systems, where kinetic energy is
        the total energy.

        Returns:
            (KE_final - KE_initial) / |KE_initial|
        """
        if len(self.kinetic_energies) < 2:
            return 0.0
        ke0 = self.kinetic_energies[0]
        ke_final = self.kinetic_energies[-1]
        if abs(ke0) < 1e-10:
            return 0.0
        return (ke_final - ke0) / abs(ke0)


class TrajectoryObserver(Observer):
    """
    Records particle positions and velocities over time.
    """

    def __init__(self, interval: int = 100) -> None:
        """Initialize trajectory observer."""
        super().__init__(interval)
        self.frames: List[Dict[str, Any]] = []

    def observe(self, system: "System", step: int) -> None:
        """Record frame."""
        frame = system.frame
        self.frames.append({
            "step": step,
            "time": system.time,
            "positions": frame.positions.as_array().copy(),
            "velocities": frame.velocities.as_array().copy(),
            "cell": frame.cell.get_name(),
        })

    def get_name(self) -> str:
        """Return observer name."""
        return f"TrajectoryObserver(interval={self.interval})"


class PrintObserver(Observer):
    """
    Prints simulation progress to console.
    """

    def __init__(self, interval: int = 100) -> None:
        """Initialize print observer."""
        super().__init__(interval)

    def observe(self, system: "System", step: int) -> None:
        """Print step info."""
        kinetic = system.compute_kinetic_energy()
        line = (
            f"Step {step:6d} | "
            f"t={system.time:10.4f} | "
            f"N={system.n_particles:6d} | "
            f"KE={kinetic:12.4f}"
        )
        if system.n_particles >= 2:
            line += f" | T={system.compute_temperature():8.2f}"
        print(line)

    def get_name(self) -> str:
        """Return observer name."""
        return f"PrintObserver(interval={self.interval})"
