"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary; core/ never sees pydantic models
    - Wire names are camelCase; amounts stay decimal strings end to end

Design Decisions:
    - Separate from core dataclasses: schemas are API contracts, dataclasses are domain values
"""
