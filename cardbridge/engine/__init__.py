"""Parsing, resolution and card creation engine for cardbridge."""

from cardbridge.engine.parser import parse_task_input, sanitize_message_text, split_assignee_names
from cardbridge.engine.resolver import resolve_assignee_ids, resolve_routing
from cardbridge.engine.directory_cache import DirectoryCache
from cardbridge.engine.pipeline import create_card_from_message

__all__ = [
    "parse_task_input",
    "sanitize_message_text",
    "split_assignee_names",
    "resolve_assignee_ids",
    "resolve_routing",
    "DirectoryCache",
    "create_card_from_message",
]
