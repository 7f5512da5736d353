"""FastAPI web application for cardbridge."""

import json
import logging
from typing import Any, Callable

from fastapi import Depends, FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel

from cardbridge.config import APP_VERSION
from cardbridge.api.dependencies import get_context_provider
from cardbridge.context import BridgeContext
from cardbridge.engine.pipeline import create_card_from_message
from cardbridge.integrations.basecamp import BasecampAPIError
from cardbridge.logging_config import setup_logging
from cardbridge.models.chat import ChatEvent

setup_logging()
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="cardbridge",
    description="Creates Basecamp cards from Google Chat task requests",
    version=APP_VERSION,
)


# Response models
class WebhookResponse(BaseModel):
    """Chat reply for a webhook call."""
    text: str


def _failure_reason(exc: Exception) -> str:
    if isinstance(exc, BasecampAPIError) and exc.detail:
        return exc.detail
    return str(exc)


async def _read_json(request: Request) -> Any:
    body = await request.body()
    if not body:
        return {}
    try:
        return json.loads(body)
    except ValueError:
        logger.warning("Webhook body is not valid JSON; using defaults")
        return {}


@app.get("/", response_class=PlainTextResponse)
async def root():
    """Plain-text liveness message."""
    return "✅ Server is running and ready for Google Chat → Basecamp integration!"


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "version": APP_VERSION}


@app.post("/google-chat-webhook", response_model=WebhookResponse)
async def google_chat_webhook(
    request: Request,
    context_provider: Callable[[], BridgeContext] = Depends(get_context_provider),
):
    """Create a Basecamp card from a Google Chat message.

    Responds once: 200 after the card is created (and assigned), or 500 with
    the failure reason.
    """
    try:
        event = ChatEvent.from_payload(await _read_json(request))
        context = await run_in_threadpool(context_provider)
        result = await run_in_threadpool(create_card_from_message, event.message, context)
    except Exception as e:
        detail = e.detail if isinstance(e, BasecampAPIError) else None
        logger.error(f"Error handling webhook or Basecamp API: {type(e).__name__}: {str(e)}"
                     + (f" | upstream: {detail}" if detail else ""))
        return JSONResponse(
            status_code=500,
            content={"text": f"❌ Failed to create Basecamp card. {_failure_reason(e)}"},
        )

    return WebhookResponse(
        text=f"✅ Task successfully created in Basecamp project! ({result.task.title})"
    )
