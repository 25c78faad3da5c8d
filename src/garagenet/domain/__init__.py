"""Domain layer: enums, field paths, entity models, validation.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
