"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.create_app (no auto-discovery)
    - All endpoints return the JSON envelope (success flag, message, payload)

Design Decisions:
    - Thin routes delegate to the UserStore and translate its results
"""
