"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All non-stream endpoints return structured JSON responses

Design Decisions:
    - Thin routes delegate straight to repositories (no service layer: nothing to orchestrate)
"""
