"""
Pydantic schemas for user accounts.

JSON uses camelCase (firstName, isAdmin); attributes stay snake_case so
responses can be built straight from ORM rows.
"""

from pydantic import BaseModel, Field
from typing import List


EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+$"


class UserCreateRequest(BaseModel):
    """Schema for registering a user"""
    username: str = Field(..., min_length=1, max_length=25)
    first_name: str = Field(..., alias="firstName", min_length=1, max_length=30)
    last_name: str = Field(..., alias="lastName", min_length=1, max_length=30)
    email: str = Field(..., min_length=6, max_length=60, pattern=EMAIL_PATTERN)
    is_admin: bool = Field(False, alias="isAdmin")

    class Config:
        populate_by_name = True
        extra = "forbid"


class UserUpdateRequest(BaseModel):
    """Schema for a partial user update; username cannot change"""
    first_name: str = Field(None, alias="firstName", min_length=1, max_length=30)
    last_name: str = Field(None, alias="lastName", min_length=1, max_length=30)
    email: str = Field(None, min_length=6, max_length=60, pattern=EMAIL_PATTERN)
    is_admin: bool = Field(None, alias="isAdmin")

    class Config:
        extra = "forbid"


class UserResponse(BaseModel):
    """Schema for user response"""
    username: str
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    email: str
    is_admin: bool = Field(..., alias="isAdmin")

    class Config:
        from_attributes = True
        populate_by_name = True


class UserDetailResponse(UserResponse):
    """User together with the ids of jobs applied to"""
    jobs: List[int] = []


class UserEnvelope(BaseModel):
    user: UserResponse


class UserDetailEnvelope(BaseModel):
    user: UserDetailResponse


class UserListEnvelope(BaseModel):
    users: List[UserResponse]
