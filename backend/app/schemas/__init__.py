"""API Schemas — Pydantic models describing response bodies.

Invariants:
    - Schemas never import ORM models (from_attributes does the mapping)
"""
