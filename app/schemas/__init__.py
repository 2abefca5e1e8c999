"""
Pydantic Schemas Package

Pydantic models describing the data that leaves the service layer.

WHY Separate Schemas from SQLAlchemy Models?
============================================
1. Detachment: read results do not depend on the session that loaded them
2. Immutability: frozen schemas cannot be modified by callers
3. Decoupling: database schema can evolve independently of the API
"""

from app.schemas.location import LocationRead

__all__ = [
    "LocationRead",
]
