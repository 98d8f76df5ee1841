"""Services Layer: datastore operations behind the HTTP routes.

Invariants:
    - Every function receives its AsyncSession explicitly (no global engine)
    - Writes commit through commit_or_raise so integrity failures surface as domain errors
"""
