"""
Location Pydantic Schemas

Read projections of Location rows.
"""

from pydantic import BaseModel, ConfigDict, Field


class LocationRead(BaseModel):
    """
    Immutable snapshot of a Location row.

    Built from the ORM object with from_attributes=True, so it no longer
    depends on the session that loaded it. frozen=True makes the values
    read-only.
    """

    id: int = Field(..., description="Unique identifier")
    name: str = Field(..., max_length=50, description="Location name")
    code: str = Field(..., max_length=5, description="Short location code")
    active: bool = Field(..., description="Whether the location is active")

    model_config = ConfigDict(
        from_attributes=True,
        frozen=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Denver",
                "code": "DEN",
                "active": True,
            }
        },
    )
