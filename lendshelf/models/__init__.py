"""ORM Models: SQLAlchemy declarative models for listings and interests.

Invariants:
    - All models inherit from Base (db/base.py)
    - Listing is the aggregate root; interests die with their listing

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from lendshelf.models.listing import Listing  # noqa: F401
from lendshelf.models.interest import Interest  # noqa: F401
