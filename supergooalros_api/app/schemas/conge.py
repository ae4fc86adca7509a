"""
Pydantic models for conge (leave) records.

A conge is a planned leave with a type (annual leave, maternity...),
the number of working days it consumes and an approval status.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from supergooalros_api.app.schemas.identifiers import EntityId


DEFAULT_STATUS = "EN_ATTENTE"


class CongeBase(BaseModel):
    start_date: date = Field(..., examples=["2016-08-01"])
    end_date: date = Field(..., examples=["2016-08-19"])
    leave_type: str = Field(..., min_length=1, max_length=64, examples=["ANNUEL"])
    day_count: Optional[int] = Field(None, ge=0, examples=[15])
    status: Optional[str] = Field(DEFAULT_STATUS, max_length=32, examples=["ACCEPTE"])
    comment: Optional[str] = Field(None, max_length=1000)
    employee_id: Optional[EntityId] = Field(None, examples=[42])

    @model_validator(mode="after")
    def check_dates(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class CongeWrite(CongeBase):
    """Schema for creating or updating a conge."""

    id: Optional[EntityId] = None


class CongeRead(CongeBase):
    """Schema for reading a conge from the API."""

    id: int

    model_config = {
        "from_attributes": True,
    }
