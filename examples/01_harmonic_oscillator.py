#!/usr/bin/env python3
"""
Example 1: Harmonic Oscillator

Two atoms connected by a harmonic spring, integrated with both
Velocity Verlet and position Verlet.

Physics:
    U(r) = 0.5 * k * (r - r0)^2

The two atoms oscillate around equilibrium distance r0.
Total energy is conserved (kinetic <-> potential).

Usage:
    python examples/01_harmonic_oscillator.py
"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import numpy as np
from pyverlet.core import Frame, System
from pyverlet.force import ForceCalculator
from pyverlet.integrator import VelocityVerlet, Verlet
from pyverlet.simulator import Simulator


class HarmonicBond(ForceCalculator):
    """Simple harmonic spring between two atoms."""

    def __init__(self, k: float = 1.0, r0: float = 1.0):
        self.k = k    # Spring constant
        self.r0 = r0  # Equilibrium distance

    def compute_forces(self, system):
        positions = system.frame.positions.as_array()
        dr = positions[1] - positions[0]
        r = np.linalg.norm(dr)
        f = self.k * (r - self.r0) * dr / r
        return np.array([f, -f])

    def energy(self, positions):
        r = np.linalg.norm(positions[1] - positions[0])
        return 0.5 * self.k * (r - self.r0) ** 2

    def get_name(self):
        return f"Harmonic(k={self.k}, r0={self.r0})"


def run(integrator, k, r0, r_initial, steps):
    frame = Frame(
        positions=np.array([[0.0, 0.0, 0.0], [r_initial, 0.0, 0.0]]),
        velocities=np.zeros((2, 3)),  # Start at rest
    )
    bond = HarmonicBond(k=k, r0=r0)
    system = System(frame, masses=[1.0, 1.0], force_calculator=bond)
    sim = Simulator(system=system, integrator=integrator)

    distances = [r_initial]
    energies = [bond.energy(frame.positions.as_array())]
    for _ in range(steps):
        sim.run(num_steps=1)
        positions = frame.positions.as_array()
        distances.append(np.linalg.norm(positions[1] - positions[0]))
        if isinstance(integrator, Verlet):
            # Verlet velocities are one step behind the positions
            positions = integrator.prevpos.as_array()
        energies.append(bond.energy(positions) + system.compute_kinetic_energy())
    return np.array(distances), np.array(energies)


def main():
    print("=" * 55)
    print("  Example 1: HARMONIC OSCILLATOR")
    print("  Two atoms connected by a spring")
    print("=" * 55)

    # Start stretched from equilibrium (r0=1.0, start at r=1.3)
    k, r0, r_initial = 10.0, 1.0, 1.3
    dt, steps = 0.01, 500

    # T = 2*pi*sqrt(mu/k), reduced mass of 2 equal masses: mu = m/2
    expected_period = 2 * np.pi * np.sqrt(0.5 / k)
    print(f"\nExpected oscillation period: {expected_period:.3f}")

    for integrator in (VelocityVerlet(dt=dt), Verlet(dt=dt)):
        distances, energies = run(integrator, k, r0, r_initial, steps)
        amplitude = (distances.max() - distances.min()) / 2
        drift = np.max(np.abs(energies - energies[0])) / energies[0]

        print(f"\n{'='*40}")
        print(integrator.get_name())
        print(f"{'='*40}")
        print(f"Simulation time:    {steps * dt:.2f}")
        print(f"Distance range:     [{distances.min():.3f}, {distances.max():.3f}]")
        print(f"Amplitude:          {amplitude:.3f} (expected: {r_initial - r0:.3f})")
        print(f"Max energy error:   {drift:.2e}")

    print("=" * 55)


if __name__ == "__main__":
    main()
