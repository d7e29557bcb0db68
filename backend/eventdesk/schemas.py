from typing import List, Optional

from pydantic import BaseModel, field_validator


class RegistrationRequest(BaseModel):
    # Everything is optional here so that missing fields reach the
    # pipeline's own required-field check and get its 400 answer
    companyName: Optional[str] = None  # URL-encoded
    eventName: Optional[str] = None  # URL-encoded
    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    gender: Optional[str] = None
    college: Optional[str] = None
    status: Optional[str] = None
    nationalId: Optional[str] = None

    # Collected by some forms, not part of the stored row
    age: Optional[str] = None
    university: Optional[str] = None

    @field_validator("phone", "nationalId", "age", mode="before")
    @classmethod
    def numbers_as_text(cls, value):
        """Forms may send these as JSON numbers; the format checks work on text"""
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("age", mode="before")
    @classmethod
    def blank_age_is_missing(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class RegistrationConfirmation(BaseModel):
    name: str
    email: str
    eventName: str
    registrationDate: str


class RegistrationResponse(BaseModel):
    success: bool = True
    message: str = "Registration successful"
    registration: RegistrationConfirmation


class ErrorResponse(BaseModel):
    error: str


class EventSummary(BaseModel):
    id: str
    name: str
    image: Optional[str] = None
    description: str = ""
    date: str = ""
    registrations: int = 0
    status: str = "enabled"
    companyStatus: str = "enabled"


class EventListResponse(BaseModel):
    events: List[EventSummary]
