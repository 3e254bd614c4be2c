"""
Unit tests for observer and simulator modules.
"""
import numpy as np
import pytest

from pyverlet.boundary import OrthorhombicCell
from pyverlet.core import Frame, System
from pyverlet.force import ForceCalculator
from pyverlet.integrator import VelocityVerlet, Verlet
from pyverlet.observer import (
    CompositeObserver,
    EnergyObserver,
    Observer,
    PrintObserver,
    TrajectoryObserver,
)
from pyverlet.simulator import Simulator, SimulatorBuilder


class MockForceCalculator(ForceCalculator):
    """Mock force calculator for testing."""

    def compute_forces(self, system: System) -> np.ndarray:
        """Return zero forces."""
        return np.zeros((system.n_particles, 3))

    def get_name(self) -> str:
        return "Zero"


@pytest.fixture
def simple_system() -> System:
    """Create a simple system for testing."""
    rng = np.random.default_rng(123)
    positions = rng.random((5, 3)) * 10.0
    velocities = rng.normal(0.0, 0.1, size=(5, 3))
    frame = Frame(
        positions=positions,
        velocities=velocities,
        cell=OrthorhombicCell([10.0, 10.0, 10.0]),
    )
    return System(frame, masses=np.ones(5), force_calculator=MockForceCalculator())


class TestEnergyObserver:
    """Tests for EnergyObserver."""

    def test_records_energy(self, simple_system: System) -> None:
        """Test that energy is recorded."""
        observer = EnergyObserver(interval=1)

        observer.observe(simple_system, step=0)
        observer.observe(simple_system, step=1)

        assert observer.steps == [0, 1]
        assert len(observer.kinetic_energies) == 2
        assert len(observer.temperatures) == 2
        assert observer.kinetic_energies[0] >= 0

    def test_single_particle_temperature_is_nan(self) -> None:
        """Test temperature is NaN for one particle."""
        frame = Frame(positions=np.zeros((1, 3)), velocities=np.ones((1, 3)))
        system = System(frame, masses=[1.0], force_calculator=MockForceCalculator())
        observer = EnergyObserver()
        observer.observe(system, step=0)
        assert np.isnan(observer.temperatures[0])
        assert observer.kinetic_energies[0] == pytest.approx(1.5)

    def test_kinetic_drift(self) -> None:
        """Test drift calculation."""
        observer = EnergyObserver()
        observer.kinetic_energies = [10.0, 10.01]
        assert pytest.approx(observer.get_kinetic_drift(), rel=0.01) == 0.001

    def test_drift_needs_two_points(self) -> None:
        """Test drift is zero without data."""
        assert EnergyObserver().get_kinetic_drift() == 0.0

    def test_invalid_interval(self) -> None:
        """Test interval must be >= 1."""
        with pytest.raises(ValueError, match="Interval"):
            EnergyObserver(interval=0)


class TestCompositeObserver:
    """Tests for CompositeObserver."""

    def test_delegates_to_children(self, simple_system: System) -> None:
        """Test delegation to child observers."""
        obs1 = EnergyObserver(interval=1)
        obs2 = EnergyObserver(interval=2)
        composite = CompositeObserver([obs1, obs2])

        composite.observe(simple_system, step=0)
        composite.observe(simple_system, step=1)
        composite.observe(simple_system, step=2)

        # obs1 observes all, obs2 only even steps
        assert len(obs1.steps) == 3
        assert len(obs2.steps) == 2

    def test_name(self) -> None:
        """Test composite name lists children."""
        composite = CompositeObserver([EnergyObserver(), PrintObserver()])
        assert "EnergyObserver" in composite.get_name()
        assert "PrintObserver" in composite.get_name()


class TestTrajectoryObserver:
    """Tests for TrajectoryObserver."""

    def test_records_copies(self, simple_system: System) -> None:
        """Test stored frames do not alias the live arrays."""
        observer = TrajectoryObserver(interval=1)
        observer.observe(simple_system, step=0)
        simple_system.frame.positions[0] = [-1.0, -1.0, -1.0]

        record = observer.frames[0]
        assert record["step"] == 0
        assert record["positions"].shape == (5, 3)
        assert not np.all(record["positions"][0] == -1.0)
        assert "Orthorhombic" in record["cell"]


class TestPrintObserver:
    """Tests for PrintObserver."""

    def test_prints_progress(self, simple_system: System, capsys) -> None:
        """Test one progress line per call."""
        PrintObserver(interval=1).observe(simple_system, step=7)
        out = capsys.readouterr().out
        assert "Step      7" in out
        assert "KE=" in out
        assert "T=" in out


class TestSimulator:
    """Tests for Simulator."""

    def test_run_advances_steps(self, simple_system: System) -> None:
        """Test that run advances step count and time."""
        sim = Simulator(system=simple_system, integrator=VelocityVerlet(dt=0.001))
        sim.run(num_steps=10)

        assert simple_system.step == 10
        assert simple_system.time == pytest.approx(0.01)
        assert sim.get_total_steps() == 10

    def test_run_prepares_integrator(self, simple_system: System) -> None:
        """Test the integrator is prepared before the first step."""
        integrator = Verlet(dt=0.001)
        sim = Simulator(system=simple_system, integrator=integrator)
        sim.run(num_steps=1)
        assert integrator.n_prepared == 5

    def test_reprepares_after_particle_added(self, simple_system: System) -> None:
        """Test the simulator follows particle count changes."""
        integrator = VelocityVerlet(dt=0.001)
        sim = Simulator(system=simple_system, integrator=integrator)
        sim.run(num_steps=2)

        simple_system.add_particle([1.0, 1.0, 1.0], mass=1.0)
        sim.run(num_steps=2)
        assert integrator.n_prepared == 6
        assert len(integrator.accelerations) == 6

    def test_wraps_positions(self, simple_system: System) -> None:
        """Test positions stay in the cell when wrapping is enabled."""
        simple_system.wrap_particles = True
        simple_system.frame.velocities.copy_from(np.full((5, 3), 20.0))
        sim = Simulator(system=simple_system, integrator=Verlet(dt=0.1))
        sim.run(num_steps=10)

        positions = simple_system.frame.positions.as_array()
        assert np.all(positions >= 0.0)
        assert np.all(positions < 10.0)
        np.testing.assert_allclose(simple_system.frame.velocities.as_array(), 20.0)

    def test_wrapping_enabled_between_runs(self) -> None:
        """Test enabling wrapping between runs keeps Verlet velocities smooth."""
        frame = Frame(
            positions=np.array([[9.75, 5.0, 5.0]]),
            velocities=np.array([[1.0, 0.0, 0.0]]),
            cell=OrthorhombicCell([10.0, 10.0, 10.0]),
        )
        system = System(frame, masses=[1.0], force_calculator=MockForceCalculator())
        integrator = Verlet(dt=0.1)
        sim = Simulator(system=system, integrator=integrator)
        sim.run(num_steps=1)
        assert not integrator.wrap_velocities

        system.wrap_particles = True
        for _ in range(6):
            sim.run(num_steps=1)
            assert integrator.wrap_velocities
            assert 0.0 <= frame.positions[0][0] < 10.0
            np.testing.assert_allclose(
                frame.velocities[0], [1.0, 0.0, 0.0], rtol=0, atol=1e-9
            )

    def test_observers_called(self, simple_system: System) -> None:
        """Test observers are called at their intervals."""
        observer = EnergyObserver(interval=5)
        sim = Simulator(
            system=simple_system,
            integrator=VelocityVerlet(dt=0.001),
            observers=[observer],
        )
        sim.run(num_steps=20)
        assert observer.steps == [5, 10, 15, 20]

    def test_negative_steps(self, simple_system: System) -> None:
        """Test negative step counts are rejected."""
        sim = Simulator(system=simple_system, integrator=VelocityVerlet(dt=0.001))
        with pytest.raises(ValueError):
            sim.run(num_steps=-1)

    def test_run_until(self, simple_system: System) -> None:
        """Test running to a target time."""
        sim = Simulator(system=simple_system, integrator=VelocityVerlet(dt=0.01))
        sim.run_until(0.1)
        assert simple_system.step == 10
        sim.run_until(0.05)
        assert simple_system.step == 10

    def test_reset(self, simple_system: System) -> None:
        """Test reset clears simulator counters."""
        sim = Simulator(system=simple_system, integrator=VelocityVerlet(dt=0.01))
        sim.run(num_steps=3)
        sim.reset()
        assert sim.get_total_steps() == 0


class CountingObserver(Observer):
    """Observer counting calls and finalization."""

    def __init__(self) -> None:
        super().__init__(interval=1)
        self.calls = 0
        self.finalized = False

    def observe(self, system: System, step: int) -> None:
        self.calls += 1

    def finalize(self) -> None:
        self.finalized = True

    def get_name(self) -> str:
        return "Counting"


class TestSimulatorBuilder:
    """Tests for SimulatorBuilder."""

    def test_build(self, simple_system: System) -> None:
        """Test building a working simulator."""
        observer = CountingObserver()
        sim = (
            SimulatorBuilder()
            .with_system(simple_system)
            .with_integrator(VelocityVerlet(dt=0.01))
            .add_observer(observer)
            .build()
        )
        sim.run(num_steps=4)
        assert observer.calls == 4
        assert observer.finalized

    def test_missing_system(self) -> None:
        """Test system is required."""
        with pytest.raises(ValueError, match="System is required"):
            SimulatorBuilder().with_integrator(VelocityVerlet(dt=0.01)).build()

    def test_missing_integrator(self, simple_system: System) -> None:
        """Test integrator is required."""
        with pytest.raises(ValueError, match="Integrator is required"):
            SimulatorBuilder().with_system(simple_system).build()
