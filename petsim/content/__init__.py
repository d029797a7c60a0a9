"""Static content tables (species, stages, locations, forage, facilities, moves, items).

The engine only reads these. Lookups go through ``ContentRegistry``.
"""

from petsim.content.registry import DEFAULT_CONTENT, ContentRegistry, build_registry

__all__ = ["ContentRegistry", "DEFAULT_CONTENT", "build_registry"]
