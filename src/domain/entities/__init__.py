"""Domain entities.

Pure business entities with no framework dependencies.
"""

from src.domain.entities.person import Person

__all__ = ["Person"]
