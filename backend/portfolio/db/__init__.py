"""Database Package - SQLAlchemy declarative Base and shared column helpers.

Invariants:
    - All ORM models inherit from Base (db/base.py)
"""
