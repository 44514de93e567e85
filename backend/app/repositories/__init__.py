"""Data Access Layer: CRUD over users and messages with storage-error translation.

Invariants:
    - Repositories receive their AsyncSession from the caller (never open one)
    - Each mutating operation commits exactly one logical write
"""
