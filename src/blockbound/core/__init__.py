"""Core primitives shared by the domain and service layers."""

from .rng import RNG
from .scheduler import ScheduledTask, TurnScheduler

__all__ = ["RNG", "ScheduledTask", "TurnScheduler"]
