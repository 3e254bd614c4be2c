"""
Force module for molecular dynamics simulations.

Provides the interface integrators use to obtain forces:
- ForceCalculator: Abstract base class
- FunctionForceCalculator: Adapter for plain force functions
"""

from .force_calculator import ForceCalculator, FunctionForceCalculator

__all__ = [
    "ForceCalculator",
    "FunctionForceCalculator",
]
