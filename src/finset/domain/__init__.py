"""Domain layer — set values, set algebra, sum types, and boolean logic.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
