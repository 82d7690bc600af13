"""Infrastructure Layer - store connectivity and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/
    - Every store failure is mapped to StoreError before leaving this layer
"""
