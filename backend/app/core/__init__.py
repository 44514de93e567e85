"""Core Layer: pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from repositories/, api/, infrastructure/, or models/
    - All functions are pure and deterministic
"""
