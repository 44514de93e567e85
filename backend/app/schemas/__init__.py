"""Pydantic Schemas: request/response contracts for API endpoints.

Invariants:
    - Schemas validate shape/type at the system boundary; presence rules live in
      core/validate_requests.py so their error messages stay under our control

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
