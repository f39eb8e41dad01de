"""Restaurant API Package — table orders over an in-memory menu and table registry.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
