"""Domain layer: calendar math, timezones, constraints, selection.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
