"""
Boundary layer for external system integrations.

Handles all interactions with external services (vector store, model backends).
Provides clients that translate between domain records and wire formats.
"""
