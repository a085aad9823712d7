"""User input schemas; GraphQL mutations validate their input through these."""

from pydantic import BaseModel, EmailStr, Field


class UserCreate(BaseModel):
    """Input for creating a user."""

    email: EmailStr
    name: str | None = Field(default=None, max_length=255)


class UserUpdate(BaseModel):
    """Input for updating a user (partial; None means unchanged)."""

    email: EmailStr | None = None
    name: str | None = Field(default=None, max_length=255)
