"""
Boundary layer for external system integrations.

Handles all interactions with external systems (embedding services, vector storage).
Provides adapters and clients for infrastructure dependencies.
"""
