"""Core Layer — domain types, error hierarchy and store contracts. No IO, no DB.

Invariants:
    - No module in core/ imports from api/, infrastructure/, models/ or db/

Design Decisions:
    - Contracts declared here, implemented by the infrastructure shell
"""
