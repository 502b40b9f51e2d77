"""Domain layer — the on-disk argument encoding and error types.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
"""
