"""Services Layer — the restaurant facade and its composition root.

Invariants:
    - Services depend on core/ Protocols, never on concrete stores
"""
