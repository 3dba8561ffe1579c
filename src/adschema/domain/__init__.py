"""Domain layer — fields, templates, category map, overrides, validation.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, config, or output.
"""
