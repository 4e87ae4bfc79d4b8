"""Domain layer — the toy entities each tour section is built around.

This layer depends only on stdlib and pydantic.
It must never import from services, plugins, commands, or config.
"""
