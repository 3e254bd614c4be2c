"""
Main Simulator class that drives the time integration.

Brings together System, Integrator and Observers into a simulation loop.
"""
from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from pyverlet.core import System
    from pyverlet.integrator import Integrator
    from pyverlet.observer import Observer


class Simulator:
    """
    Main MD simulation driver.

    Orchestrates the simulation loop:
    1. Prepare the integrator for the current particle count and wrapping
    2. For each step:
       a. Re-prepare the integrator if particles were added or removed
       b. Integrate equations of motion
       c. Advance time and step counters
       d. Wrap positions into the cell if the system asks for it
       e. Notify observers
    3. Finalize observers

    Example:
        >>> sim = Simulator(
        ...     system=system,
        ...     integrator=VelocityVerlet(dt=0.001),
        ...     observers=[EnergyObserver(), PrintObserver(interval=100)]
        ... )
        >>> sim.run(num_steps=10000)
    """

    def __init__(
        self,
        system: "System",
        integrator: "Integrator",
        observers: Optional[List["Observer"]] = None,
    ) -> None:
        """
        Initialize simulator.

        Args:
            system: The molecular system to simulate.
            integrator: Time integration algorithm.
            observers: List of observers (optional).
        """
        self.system = system
        self.integrator = integrator
        self.observers = observers or []

        # Track simulation statistics
        self._total_steps_run = 0

    def initialize(self) -> None:
        """
        Prepare the integrator for the current system.

        Called automatically at the start of every run(). With an unchanged
        particle count this keeps the integrator's derived state and only
        picks up changes such as a newly enabled position wrapping.
        """
        self.integrator.prepare(self.system)

    def run(self, num_steps: int) -> None:
        """
        Run the simulation for a given number of steps.

        Args:
            num_steps: Number of time steps to run.

        Raises:
            ValueError: If num_steps is negative.
        """
        if num_steps < 0:
            raise ValueError(f"num_steps must be non-negative, got {num_steps}")

        self.initialize()
        system = self.system
        integrator = self.integrator

        for _ in range(num_steps):
            # 1. Particles added or removed since the last step
            if system.n_particles != integrator.n_prepared:
                integrator.prepare(system)

            # 2. Integrate equations of motion (updates positions, velocities)
            integrator.step(system)
            system.time += integrator.dt
            system.step += 1

            # 3. Keep particles in the primary cell
            if system.is_wrapping_positions():
                system.wrap_positions()

            # 4. Notify observers
            for observer in self.observers:
                if system.step % observer.interval == 0:
                    observer.observe(system, system.step)

            self._total_steps_run += 1

        # Finalize observers
        for observer in self.observers:
            observer.finalize()

    def run_until(self, target_time: float) -> None:
        """
        Run simulation until a target simulation time.

        Args:
            target_time: Target time in simulation units.
        """
        dt = self.integrator.dt
        remaining_time = target_time - self.system.time
        if remaining_time <= 0:
            return

        num_steps = int(round(remaining_time / dt))
        self.run(num_steps)

    def get_total_steps(self) -> int:
        """Return total steps run so far."""
        return self._total_steps_run

    def reset(self) -> None:
        """Reset simulator state (not system state)."""
        self._total_steps_run = 0


class SimulatorBuilder:
    """
    Builder pattern for constructing Simulator instances.

    Example:
        >>> sim = (SimulatorBuilder()
        ...     .with_system(system)
        ...     .with_integrator(Verlet(dt=0.001))
        ...     .add_observer(EnergyObserver())
        ...     .build())
    """

    def __init__(self) -> None:
        """Initialize builder."""
        self._system: Optional["System"] = None
        self._integrator: Optional["Integrator"] = None
        self._observers: List["Observer"] = []

    def with_system(self, system: "System") -> "SimulatorBuilder":
        """Set the system."""
        self._system = system
        return self

    def with_integrator(self, integrator: "Integrator") -> "SimulatorBuilder":
        """Set the integrator."""
        self._integrator = integrator
        return self

    def add_observer(self, observer: "Observer") -> "SimulatorBuilder":
        """Add an observer."""
        self._observers.append(observer)
        return self

    def build(self) -> Simulator:
        """
        Build the simulator.

        Returns:
            Configured Simulator instance.

        Raises:
            ValueError: If required components are missing.
        """
        if self._system is None:
            raise ValueError("System is required")
        if self._integrator is None:
            raise ValueError("Integrator is required")

        return Simulator(
            system=self._system,
            integrator=self._integrator,
            observers=self._observers,
        )
