"""Inbound Google Chat event models for cardbridge.

Only the fields the webhook reads are modelled. Every field is optional and
falls back to its own default when missing or of the wrong type, so one bad
field never discards the rest of the message.
"""

import logging
from typing import Any, Optional
from pydantic import BaseModel, Field, ValidationError, ValidationInfo, field_validator

logger = logging.getLogger(__name__)


class _ChatModel(BaseModel):
    class Config:
        """Pydantic configuration."""
        extra = "ignore"
        populate_by_name = True

    @field_validator("*", mode="wrap")
    @classmethod
    def _default_on_error(cls, value: Any, handler, info: ValidationInfo) -> Any:
        try:
            return handler(value)
        except ValidationError:
            logger.warning(f"Ignoring unusable chat field {cls.__name__}.{info.field_name}: {value!r}")
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)


class ChatSender(_ChatModel):
    display_name: Optional[str] = Field(None, alias="displayName")
    email: Optional[str] = None


class ChatSpace(_ChatModel):
    space_uri: Optional[str] = Field(None, alias="spaceUri")


class ChatMessage(_ChatModel):
    """The message a user sent to the bot."""

    text: Optional[str] = None
    sender: ChatSender = Field(default_factory=ChatSender)
    space: ChatSpace = Field(default_factory=ChatSpace)
    create_time: Optional[str] = Field(None, alias="createTime")


class MessagePayload(_ChatModel):
    message: ChatMessage = Field(default_factory=ChatMessage)


class ChatPayload(_ChatModel):
    message_payload: MessagePayload = Field(default_factory=MessagePayload, alias="messagePayload")


class ChatEvent(_ChatModel):
    """Top-level Google Chat webhook event."""

    chat: ChatPayload = Field(default_factory=ChatPayload)

    @property
    def message(self) -> ChatMessage:
        return self.chat.message_payload.message

    @classmethod
    def from_payload(cls, payload: Any) -> "ChatEvent":
        """Build an event from a decoded JSON body, defaulting anything unusable."""
        if not isinstance(payload, dict):
            logger.warning(f"Webhook body is not a JSON object ({type(payload).__name__}); using defaults")
            return cls()
        return cls.model_validate(payload)
