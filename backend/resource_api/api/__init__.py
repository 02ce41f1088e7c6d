"""API Layer — FastAPI routes, outcome rendering, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON except 204 No Content

Design Decisions:
    - Thin routes delegate to services/handle_resources.py
"""
