"""Domain layer — the layout engine, its types and rules.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
