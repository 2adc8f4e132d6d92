"""Domain value objects with validation.

Immutable value objects that enforce their own constraints.
"""

from src.domain.value_objects.fetch_request import FetchRequest

__all__ = ["FetchRequest"]
