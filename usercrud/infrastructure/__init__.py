"""Infrastructure Layer — database sessions, the User record store, logging setup.

Invariants:
    - Only this layer (and services/) performs IO
    - SQLAlchemy types never leak into core/
"""
