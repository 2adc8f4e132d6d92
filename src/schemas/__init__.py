"""Payload schemas for external APIs.

Pydantic models validating JSON received from the Star Wars API.
Schemas are kept separate from domain entities.

Usage:
    from src.schemas import PersonPayload
"""

from src.schemas.person_schemas import PersonPayload

__all__ = ["PersonPayload"]
