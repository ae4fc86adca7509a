"""
Pydantic models for absence records.

An absence is a period during which an employee was not at work,
with an optional type (sickness, personal reason...) and a flag
telling whether it has been justified.  ``AbsenceWrite`` is the body of
``POST`` and ``PUT`` requests; its ``id`` must be absent on creation.
``AbsenceRead`` is what the API returns.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from supergooalros_api.app.schemas.identifiers import EntityId


class AbsenceBase(BaseModel):
    start_date: date = Field(..., examples=["2016-05-02"])
    end_date: Optional[date] = Field(None, examples=["2016-05-04"])
    absence_type: Optional[str] = Field(None, max_length=64, examples=["MALADIE"])
    reason: Optional[str] = Field(None, max_length=1000, examples=["Grippe"])
    justified: bool = Field(False, examples=[True])
    employee_id: Optional[EntityId] = Field(None, examples=[42])

    @model_validator(mode="after")
    def check_dates(self):
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class AbsenceWrite(AbsenceBase):
    """Schema for creating or updating an absence."""

    id: Optional[EntityId] = None


class AbsenceRead(AbsenceBase):
    """Schema for reading an absence from the API."""

    id: int

    model_config = {
        "from_attributes": True,
    }
