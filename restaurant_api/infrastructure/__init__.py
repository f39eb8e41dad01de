"""Infrastructure Layer — in-memory stores, locking and logging setup.

Invariants:
    - Stores raise only core/errors.py error kinds
"""
