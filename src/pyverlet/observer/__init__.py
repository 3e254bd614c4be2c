"""
Observer module for monitoring simulation progress.

Provides:
- Observer: Abstract base class
- CompositeObserver: Fan-out to several observers
- EnergyObserver: Kinetic energy and temperature time series
- TrajectoryObserver: Position and velocity snapshots
- PrintObserver: Console progress output
"""

from .observer import (
    CompositeObserver,
    EnergyObserver,
    Observer,
    PrintObserver,
    TrajectoryObserver,
)

__all__ = [
    "Observer",
    "CompositeObserver",
    "EnergyObserver",
    "TrajectoryObserver",
    "PrintObserver",
]
