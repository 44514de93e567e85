"""Ice Breakun API Package: users and chat messages over a relational store.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
