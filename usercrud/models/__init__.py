"""ORM Models — SQLAlchemy declarative models for all persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Every model is imported here so Base.metadata is complete for create_all/Alembic
"""

from usercrud.models.user import User  # noqa: F401
