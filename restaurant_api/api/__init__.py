"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every response uses the {"status": ..., "data"|"message": ...} envelope

Design Decisions:
    - Thin routes delegate to RestaurantFacade; no business logic here
"""
