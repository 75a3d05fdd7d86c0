"""API Layer: FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Successful responses are JSON records; failures follow the configured error mode

Design Decisions:
    - Thin routes delegate to services (handler → helper → repository)
"""
