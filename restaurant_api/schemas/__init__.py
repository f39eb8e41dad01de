"""Pydantic Schemas — response envelopes and seed-file validation.

Invariants:
    - Schemas validate at the system boundary (seed files, API responses)
    - Domain types from core/ converted explicitly (from_domain / to_domain)
"""
