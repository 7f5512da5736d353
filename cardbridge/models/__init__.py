"""Data models for cardbridge."""

from cardbridge.models.directory import DirectoryUser, DirectoryProject, Card
from cardbridge.models.task import TaskDraft, RoutingTarget, ResolvedTask, CardResult
from cardbridge.models.chat import ChatEvent, ChatMessage, ChatSender, ChatSpace

__all__ = [
    "DirectoryUser",
    "DirectoryProject",
    "Card",
    "TaskDraft",
    "RoutingTarget",
    "ResolvedTask",
    "CardResult",
    "ChatEvent",
    "ChatMessage",
    "ChatSender",
    "ChatSpace",
]
