"""ORM Models — SQLAlchemy declarative models for all domain entities.

Design Decisions:
    - All models imported here so Base.metadata is complete before create_all
"""

from resource_api.models.resource import Resource  # noqa: F401
