"""Database Declarations — SQLAlchemy Base shared by models and migrations.

Invariants:
    - No engine is created at import time (see infrastructure/database.py)
"""
