"""Application services."""

from .simulation import SimulationService, get_simulation_service, reset_simulation_service

__all__ = [
    "SimulationService",
    "get_simulation_service",
    "reset_simulation_service",
]
