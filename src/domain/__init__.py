"""Domain layer - Pure business logic.

This layer contains the entities, value objects, errors and protocols
(ports) of the demo. It has NO dependencies on any framework or
infrastructure - it is pure Python.

Structure:
- entities/: Domain entities (Person)
- value_objects/: Value objects (FetchRequest)
- errors/: Error taxonomy returned in Result types
- protocols/: Domain protocols (fetcher, logger)
"""
