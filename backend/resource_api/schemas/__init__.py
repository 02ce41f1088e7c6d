"""Pydantic Schemas — typed payloads and response shapes for the resource API.

Invariants:
    - Payload models are only built by core/validate_resource.py, after checks
    - Response models serialize with camelCase aliases

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
