"""Portfolio Backend - CRUD content API for a personal portfolio site.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
