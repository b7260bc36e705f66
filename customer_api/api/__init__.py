"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON responses; failures use the {"message", "error"} envelope

Design Decisions:
    - Thin routes delegate to the customer gateway
"""
