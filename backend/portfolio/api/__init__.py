"""API Layer - FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON; errors carry a top-level "message"

Design Decisions:
    - Thin routes: parse query/body, call one repository method, map absence to 404
"""
