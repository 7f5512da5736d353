"""Turn one chat message into a Basecamp card."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from cardbridge.engine.parser import parse_task_input, sanitize_message_text
from cardbridge.engine.resolver import resolve_assignee_ids, resolve_routing
from cardbridge.models.chat import ChatMessage
from cardbridge.models.constants import (
    DEFAULT_CHAT_SPACE_URL,
    DEFAULT_MESSAGE_TEXT,
    DEFAULT_SENDER_EMAIL,
    DEFAULT_SENDER_NAME,
)
from cardbridge.models.task import CardResult, ResolvedTask, RoutingTarget

if TYPE_CHECKING:
    from cardbridge.context import BridgeContext

logger = logging.getLogger(__name__)


def create_card_from_message(message: ChatMessage, context: BridgeContext) -> CardResult:
    """Parse, resolve, create and assign a card for a chat message.

    Steps run in order and any failure propagates; a card that was created
    before a failing update is left in place.
    """
    settings = context.settings
    text = sanitize_message_text(message.text or DEFAULT_MESSAGE_TEXT, bot_name=settings.bot_name)
    draft = parse_task_input(text)

    users = context.users.get()
    assignee_ids = resolve_assignee_ids(draft.assignee_names, users)

    if draft.project_name:
        routing = resolve_routing(
            draft.project_name,
            context.projects.get(),
            default_project_id=settings.project_id,
            default_list_id=settings.list_id,
            project_lists=context.project_lists,
        )
    else:
        routing = RoutingTarget(project_id=settings.project_id, list_id=settings.list_id)

    task = ResolvedTask(
        **draft.model_dump(),
        assignee_ids=assignee_ids,
        routing=routing,
        sender_name=message.sender.display_name or DEFAULT_SENDER_NAME,
        sender_email=message.sender.email or DEFAULT_SENDER_EMAIL,
        chat_space_url=message.space.space_uri or DEFAULT_CHAT_SPACE_URL,
        message_time=message.create_time or datetime.now(timezone.utc).isoformat(),
    )
    logger.info(f"Extracted task info: {task.model_dump_json(indent=2)}")

    card = context.client.create_card(draft, routing.project_id, routing.list_id)
    updated = context.client.update_card(card.id, assignee_ids, draft.due_on, routing.project_id)

    return CardResult(card=card, task=task, assigned=updated is not None)
