"""Service layer — tour sections returning ServiceResult.

Services may import from domain, config and plugins.
They must never import from commands or output.
"""
