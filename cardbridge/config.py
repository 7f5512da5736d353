"""Environment configuration for cardbridge.

Values come from the process environment, with a `.env` file in the project
root loaded first if it exists.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env file from project root if it exists
_project_root = Path(__file__).parent.parent
load_dotenv(_project_root / ".env")

APP_VERSION = "0.1.0"
BASECAMP_API_BASE = "https://3.basecampapi.com"
DEFAULT_USER_AGENT = "cardbridge (Google Chat integration)"
DEFAULT_BOT_NAME = "Basecamp Task Bot"

_REQUIRED = (
    "BASECAMP_ACCOUNT_ID",
    "BASECAMP_PROJECT_ID",
    "BASECAMP_LIST_ID",
    "BASECAMP_ACCESS_TOKEN",
)


@dataclass(frozen=True)
class Settings:
    """Immutable runtime settings."""
    account_id: str
    project_id: str
    list_id: str
    access_token: str
    user_agent: str = DEFAULT_USER_AGENT
    api_base: str = BASECAMP_API_BASE
    timeout_sec: float = 10.0
    cache_ttl_sec: Optional[float] = None
    bot_name: str = DEFAULT_BOT_NAME


def is_debug() -> bool:
    return os.getenv("DEBUG", "False").lower() == "true"


def get_host() -> str:
    return os.getenv("HOST", "0.0.0.0")


def get_port() -> int:
    return int(os.getenv("PORT", "3000"))


def _optional_float(name: str) -> Optional[float]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return float(raw)


def load_settings() -> Settings:
    """Build Settings from the environment.

    Raises:
        ValueError: If any required Basecamp variable is unset.
    """
    missing = [name for name in _REQUIRED if not os.getenv(name)]
    if missing:
        raise ValueError(
            f"Missing required environment variables: {', '.join(missing)}.\n\n"
            "Set them in your shell or in a .env file in the project root, e.g.:\n"
            "  BASECAMP_ACCOUNT_ID=1234567\n"
            "  BASECAMP_PROJECT_ID=7654321\n"
            "  BASECAMP_LIST_ID=1111111\n"
            "  BASECAMP_ACCESS_TOKEN=your_token_here\n"
        )

    return Settings(
        account_id=os.environ["BASECAMP_ACCOUNT_ID"],
        project_id=os.environ["BASECAMP_PROJECT_ID"],
        list_id=os.environ["BASECAMP_LIST_ID"],
        access_token=os.environ["BASECAMP_ACCESS_TOKEN"],
        user_agent=os.getenv("USER_AGENT") or DEFAULT_USER_AGENT,
        api_base=(os.getenv("BASECAMP_API_BASE") or BASECAMP_API_BASE).rstrip("/"),
        timeout_sec=float(os.getenv("BASECAMP_TIMEOUT_SEC", "10")),
        cache_ttl_sec=_optional_float("DIRECTORY_CACHE_TTL_SEC"),
        bot_name=os.getenv("BOT_NAME") or DEFAULT_BOT_NAME,
    )
