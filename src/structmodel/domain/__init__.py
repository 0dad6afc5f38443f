"""Domain layer: rules, violations and results.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, config or the CLI.
"""
