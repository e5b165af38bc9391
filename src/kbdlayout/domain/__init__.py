"""Domain layer — actions, context, and layout composition rules.

This layer depends only on stdlib and pydantic.
It must never import from services, output, commands, or config.
"""
