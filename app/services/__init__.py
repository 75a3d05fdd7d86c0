"""Services Layer: per-resource helpers and the repositories they call.

Invariants:
    - Helpers receive their AsyncSession at construction (no global DB handle)
    - Helpers own transaction boundaries; repositories only flush

Design Decisions:
    - One helper module per resource for locality
"""
