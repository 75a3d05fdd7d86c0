"""Database Package: declarative Base and a standalone session factory.

Invariants:
    - Base is imported by every model and by schema creation
    - Request-path sessions come from infrastructure/database.py, not from here
"""
