"""Route Modules: one file per resource.

Invariants:
    - Each module defines its own APIRouter with tags
    - Routes never query the datastore directly (delegate to services/)
"""
