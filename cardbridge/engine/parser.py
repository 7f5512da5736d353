"""Deterministic parser for chat task requests.

Turns one free-text message into a TaskDraft by splitting on inline markers:

    Fix login bug notes- breaks on mobile assigned to- Alice, Bob 2024-05-01 p- Truva

Markers are case-insensitive. Precedence and fallback order are fixed:
same input -> same draft, and no input raises.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
import re
from typing import List, Optional

from cardbridge.config import DEFAULT_BOT_NAME
from cardbridge.models.task import TaskDraft


_DATE_RE = re.compile(r"\b\d{4}-\d{2}-\d{2}\b", re.A)
_NOTES_MARKER_RE = re.compile(r"\bnotes?-", re.I | re.A)
_ASSIGNEE_MARKER_RE = re.compile(r"(?:assigned to-|to-)", re.I)

# Notes run until the next assignee marker, a date, or end of string.
_NOTES_RE = re.compile(
    r"\bnotes?-\s*(.+?)(?=\s*(?:assigned to-|to-|\b\d{4}-\d{2}-\d{2}\b|$))", re.I | re.A
)
_ASSIGNEE_RE = re.compile(r"(?:assigned to-|to-)\s*([A-Za-z,\s]+)", re.I)
_PROJECT_RE = re.compile(r"\bp-\s*([A-Za-z0-9\s]+)", re.I | re.A)

_USER_MENTION_RE = re.compile(r"<@[^>]+>")


def _bot_mention_re(bot_name: str) -> re.Pattern:
    words = [re.escape(w) for w in bot_name.split()]
    return re.compile(r"@\s*" + r"\s*".join(words), re.I)


def sanitize_message_text(text: Optional[str], bot_name: str = DEFAULT_BOT_NAME) -> str:
    """Strip bot mentions and <@user> markup from a chat message."""
    if not text:
        return ""
    cleaned = text
    if bot_name.strip():
        cleaned = _bot_mention_re(bot_name).sub("", cleaned)
    cleaned = _USER_MENTION_RE.sub("", cleaned)
    return cleaned.strip()


def _today_iso() -> str:
    return datetime.now(timezone.utc).date().isoformat()


def _extract_title(message: str) -> str:
    if _NOTES_MARKER_RE.search(message):
        title = _NOTES_MARKER_RE.split(message, maxsplit=1)[0].strip()
    elif _ASSIGNEE_MARKER_RE.search(message):
        title = _ASSIGNEE_MARKER_RE.split(message, maxsplit=1)[0].strip()
    else:
        title = message.strip()
    return _DATE_RE.sub("", title, count=1).strip()


def parse_task_input(message: str, *, today: Optional[date] = None) -> TaskDraft:
    """Parse a chat message into a TaskDraft.

    - due_on: first YYYY-MM-DD substring, verbatim; otherwise `today` (UTC date by default)
    - notes: text after `notes-`/`note-` up to the next marker, a date, or end of string
    - assignee_names: letters/commas/spaces after `assigned to-` or `to-`
    - project_name: letters/digits/spaces after `p-`
    - title: text before the first notes marker (else assignee marker), minus the date
    """
    message = message or ""

    date_match = _DATE_RE.search(message)
    if date_match:
        due_on = date_match.group(0)
    else:
        due_on = today.isoformat() if today else _today_iso()

    notes_match = _NOTES_RE.search(message)
    notes = notes_match.group(1).strip() if notes_match else ""

    assignee_match = _ASSIGNEE_RE.search(message)
    assignee_names = assignee_match.group(1).strip() if assignee_match else None

    project_match = _PROJECT_RE.search(message)
    project_name = project_match.group(1).strip() if project_match else None

    return TaskDraft(
        title=_extract_title(message),
        notes=notes,
        due_on=due_on,
        assignee_names=assignee_names or None,
        project_name=project_name or None,
    )


def split_assignee_names(raw: Optional[str]) -> List[str]:
    """Split a raw assignee string into trimmed, non-empty name fragments."""
    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]
