"""Pydantic Schemas — request/response contracts for API endpoints.

Invariants:
    - Schemas validate JSON shape at the system boundary
    - Separate from models: schemas are API contracts, models are persistence
"""
