"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports):
- swapi/: Star Wars API client (httpx) and payload decoder
- logging/: Structured console logging (structlog)

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
