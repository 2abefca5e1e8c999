"""
SQLAlchemy Models Package

Import all models here to:
1. Make them available as: from app.models import Location
2. Ensure Alembic discovers them for migrations
"""

from app.models.location import Location

__all__ = [
    "Location",
]
