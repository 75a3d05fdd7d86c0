"""Pydantic Schemas: request validation for the add-event and add-attendee endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies) and nowhere else
    - Only identifying keys are checked; every other field passes through verbatim

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence (ADR: DDD boundary)
    - extra="allow": caller-defined fields survive validation in model_extra
"""
