"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Routes translate action outcomes into HTTP; they hold no business logic
"""
