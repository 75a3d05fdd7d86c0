"""Infrastructure Layer: database engine lifecycle and logging setup.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Storage failures escaping a session are mapped to StorageError
"""
