"""User Schemas - account provisioning body. No HTTP surface."""

from pydantic import Field

from portfolio.schemas.base import WriteSchema


class UserCreate(WriteSchema):
    username: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=1)
