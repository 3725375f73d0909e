"""Search engine components for per-turn move selection."""

from jumpgrid.engine_search.dispatcher import EngineConfig, EngineResult, JumpEngine
from jumpgrid.engine_search.time_manager import TimeManager

__all__ = [
    "EngineConfig",
    "EngineResult",
    "JumpEngine",
    "TimeManager",
]
