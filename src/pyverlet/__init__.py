"""
pyverlet - Time integration for molecular dynamics.

Advances particle systems by fixed time steps using forces supplied by
an external force calculator.

Main features:
- Velocity Verlet and position Verlet integrators behind one
  prepare/step interface
- Derived per-particle state that follows the live particle count
- Periodic unit cells with minimal image handling
- YAML configuration for integrator selection
"""

__version__ = "0.1.0"
__author__ = "pyverlet Team"
