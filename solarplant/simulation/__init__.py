"""Sun sweep simulation."""

from solarplant.simulation.engine import SimulationState, SweepEngine, SweepResult

__all__ = ["SimulationState", "SweepEngine", "SweepResult"]
