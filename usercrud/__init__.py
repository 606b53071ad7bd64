"""User CRUD API Package — REST service for a single User resource.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
