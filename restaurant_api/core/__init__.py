"""Core Layer — domain types, errors and store contracts. No IO, no async.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
"""
