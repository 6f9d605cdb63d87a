"""
Application layer.

Orchestrates domain logic and boundary adapters into use cases.
"""
