"""Pydantic Schemas: request/response contracts for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, API responses)
    - Wire names are camelCase; snake_case field names are also accepted on input

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
