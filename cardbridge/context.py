"""Service context: settings, Basecamp client and directory caches.

One context is built per process and handed to the webhook handler, which
keeps shared state explicit and lets tests swap in their own.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional

from cardbridge.config import Settings
from cardbridge.engine.directory_cache import DirectoryCache
from cardbridge.integrations.basecamp import BasecampClient
from cardbridge.models.constants import PROJECT_TO_LIST_ID
from cardbridge.models.directory import BasecampId, DirectoryProject, DirectoryUser


@dataclass
class BridgeContext:
    settings: Settings
    client: BasecampClient
    users: DirectoryCache[DirectoryUser]
    projects: DirectoryCache[DirectoryProject]
    project_lists: Dict[str, BasecampId] = field(default_factory=lambda: dict(PROJECT_TO_LIST_ID))


def build_context(settings: Settings, client: Optional[BasecampClient] = None) -> BridgeContext:
    """Wire a client and its directory caches from settings."""
    client = client or BasecampClient.from_settings(settings)
    users = DirectoryCache(
        lambda: client.list_project_people(settings.project_id),
        name="users",
        ttl_seconds=settings.cache_ttl_sec,
    )
    projects = DirectoryCache(
        client.list_projects,
        name="projects",
        ttl_seconds=settings.cache_ttl_sec,
    )
    return BridgeContext(settings=settings, client=client, users=users, projects=projects)
