"""Route Modules: one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes validate presence, call a repository, and shape the envelope; nothing else
"""
