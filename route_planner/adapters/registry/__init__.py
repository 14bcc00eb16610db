"""Registry adapters - Implementations of the city lookup ports.

Available implementations:
- InMemoryCityRegistry: Cities loaded from a tab-separated file
"""

from .memory_registry import InMemoryCityRegistry

__all__ = ["InMemoryCityRegistry"]
