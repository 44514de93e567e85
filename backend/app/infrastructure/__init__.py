"""Infrastructure Layer: storage engine access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/ or repositories/
"""
