"""Domain layer — instants, zones, and the civil calendar.

This layer depends only on the stdlib.
It must never import from services, infrastructure, commands, or config.
"""
