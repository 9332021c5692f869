"""Application layer - use cases and orchestration."""

from .planner import FloorPlanner

__all__ = ["FloorPlanner"]
