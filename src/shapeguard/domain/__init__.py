"""Domain layer — the schema engine.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
INVARIANT: Nothing in this layer logs or performs I/O.
"""
