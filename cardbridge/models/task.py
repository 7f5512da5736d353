"""Task data models for cardbridge."""

from typing import List, Optional
from pydantic import BaseModel, Field

from cardbridge.models.directory import BasecampId, Card
from cardbridge.models.constants import (
    DEFAULT_CHAT_SPACE_URL,
    DEFAULT_SENDER_EMAIL,
    DEFAULT_SENDER_NAME,
)


class TaskDraft(BaseModel):
    """Task fields extracted from a single chat message."""

    title: str = Field(..., description="Card title")
    notes: str = Field("", description="Card content")
    due_on: str = Field(..., description="Due date as YYYY-MM-DD")
    assignee_names: Optional[str] = Field(None, description="Raw comma-separated assignee names")
    project_name: Optional[str] = Field(None, description="Raw project name fragment")

    class Config:
        """Pydantic configuration."""
        frozen = True


class RoutingTarget(BaseModel):
    """Where a card is created: project (bucket) and card table list."""

    project_id: BasecampId
    list_id: BasecampId

    class Config:
        """Pydantic configuration."""
        frozen = True


class ResolvedTask(TaskDraft):
    """TaskDraft plus directory ids, routing and sender metadata."""

    assignee_ids: List[BasecampId] = Field(default_factory=list, description="Resolved Basecamp person ids")
    routing: RoutingTarget = Field(..., description="Target project and list")
    sender_name: str = Field(DEFAULT_SENDER_NAME, description="Chat sender display name")
    sender_email: str = Field(DEFAULT_SENDER_EMAIL, description="Chat sender email")
    chat_space_url: str = Field(DEFAULT_CHAT_SPACE_URL, description="Chat space URI")
    message_time: str = Field(..., description="Message creation time (ISO-8601)")


class CardResult(BaseModel):
    """Outcome of turning one message into a card."""

    card: Card
    task: ResolvedTask
    assigned: bool = Field(False, description="Whether the assignee update was sent")
