"""Pydantic Schemas - request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, API responses)
    - JSON field names are camelCase; Python attributes are snake_case
    - Write schemas forbid unknown keys, so server-assigned fields
      (id, createdAt, updatedAt) are rejected rather than ignored

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
