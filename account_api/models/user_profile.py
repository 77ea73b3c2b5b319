"""
User profile models for the mocked users API
"""

from pydantic import BaseModel, Field, StrictBool, StrictInt, StrictStr

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
TIMESTAMP_PATTERN = r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z$"


class Address(BaseModel):
    street: StrictStr
    city: StrictStr
    state: StrictStr
    zipcode: StrictStr
    country: StrictStr


class Company(BaseModel):
    name: StrictStr
    industry: StrictStr
    position: StrictStr


class Preferences(BaseModel):
    language: StrictStr
    timezone: StrictStr
    notifications_enabled: StrictBool


class UserProfile(BaseModel):
    id: StrictInt
    name: StrictStr
    email: StrictStr
    username: StrictStr
    phone: StrictStr
    address: Address
    company: Company
    dob: StrictStr = Field(pattern=DATE_PATTERN)
    profile_picture_url: StrictStr
    is_active: StrictBool
    created_at: StrictStr = Field(pattern=TIMESTAMP_PATTERN)
    updated_at: StrictStr = Field(pattern=TIMESTAMP_PATTERN)
    preferences: Preferences


class ErrorPayload(BaseModel):
    """Error body returned by the users API for 4xx/5xx answers"""
    error: StrictStr
    details: StrictStr
    status: StrictInt
    timestamp: StrictStr
