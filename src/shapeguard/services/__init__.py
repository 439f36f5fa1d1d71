"""Service layer — tooling built on top of the schema engine.

Services may import from the domain layer.
They must never import from commands or output.
"""
