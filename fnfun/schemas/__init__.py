"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (query params, request bodies, responses)
    - Core functions only ever receive already-validated values
"""
