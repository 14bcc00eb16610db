"""Application services orchestrating the routing engine and its adapters."""

from .planner import RoutePlannerService

__all__ = ["RoutePlannerService"]
