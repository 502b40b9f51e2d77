"""Infrastructure layer — temporary files and response-file reads.

This layer depends on stdlib and the domain layer only.
It must never import from services, commands, or output.
"""
