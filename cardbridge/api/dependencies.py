"""FastAPI dependencies for cardbridge."""

import threading
from typing import Callable, Optional

from cardbridge.config import load_settings
from cardbridge.context import BridgeContext, build_context

_context: Optional[BridgeContext] = None
_context_lock = threading.Lock()


def get_context() -> BridgeContext:
    """Return the process-wide service context, building it on first use.

    Raises:
        ValueError: If required configuration is missing.
    """
    global _context
    if _context is None:
        with _context_lock:
            if _context is None:
                _context = build_context(load_settings())
    return _context


def get_context_provider() -> Callable[[], BridgeContext]:
    """Dependency returning the context factory.

    The webhook calls the factory inside its own error handling so that
    configuration errors surface as the webhook's 500 payload.
    """
    return get_context


def reset_context() -> None:
    """Forget the process-wide context (settings and caches are rebuilt on next use)."""
    global _context
    with _context_lock:
        _context = None
