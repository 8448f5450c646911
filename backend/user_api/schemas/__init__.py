"""Pydantic Schemas — request/response contracts for API endpoints.

Invariants:
    - Request schemas only parse the JSON shape; field rules live in core.validate_user
    - Response schemas define the success envelope

Design Decisions:
    - Separate from core records: schemas are API contracts, User is the store's record
"""
