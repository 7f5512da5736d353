"""Basecamp directory and card models for cardbridge."""

from typing import Union
from pydantic import BaseModel, Field

# Basecamp returns integer ids; configured ids arrive as strings.
BasecampId = Union[int, str]


class DirectoryUser(BaseModel):
    """A person on the Basecamp project."""

    id: BasecampId = Field(..., description="Basecamp person id")
    name: str = Field(..., description="Full display name")

    class Config:
        """Pydantic configuration."""
        extra = "ignore"


class DirectoryProject(BaseModel):
    """A Basecamp project visible to the access token."""

    id: BasecampId = Field(..., description="Basecamp project (bucket) id")
    name: str = Field(..., description="Project name")

    class Config:
        """Pydantic configuration."""
        extra = "ignore"


class Card(BaseModel):
    """A card in a Basecamp card table, as returned by the API."""

    id: BasecampId = Field(..., description="Basecamp card id")
    title: str = Field("", description="Card title")

    class Config:
        """Pydantic configuration."""
        extra = "allow"
