"""Pydantic Schemas: request/response validation for API endpoints.

Invariants:
    - Schemas validate shape and size at the system boundary
    - Business rules (blank fields, positive price, date order) live in core/,
      so the HTTP and service paths reject the same inputs the same way

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
