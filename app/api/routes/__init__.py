"""Route Modules: one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter
    - Routes never contain business logic (delegate to services helpers)

Design Decisions:
    - Explicit registration in main.py over auto-discovery
    - Resource routes keep the flat legacy paths (/event=..., /add_event, /add_attendee);
      only health lives under /api/v1
"""
