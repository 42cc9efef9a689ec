"""Domain layer — value records, enums, and the toolkit operations.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
