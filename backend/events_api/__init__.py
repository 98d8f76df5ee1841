"""Events API Package: events, attendees and users over a relational store.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
