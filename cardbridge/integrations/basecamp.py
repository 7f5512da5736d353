"""Basecamp 3 integration for cardbridge."""

import logging
from typing import Any, Dict, List, Optional, Sequence

import requests

from cardbridge.config import BASECAMP_API_BASE, DEFAULT_USER_AGENT, Settings
from cardbridge.models.directory import BasecampId, Card, DirectoryProject, DirectoryUser
from cardbridge.models.task import TaskDraft

logger = logging.getLogger(__name__)


class BasecampAPIError(Exception):
    """A Basecamp request failed (network error or non-2xx response)."""

    def __init__(self, message: str, *, status_code: Optional[int] = None, detail: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


def _error_detail(response: Optional[requests.Response]) -> Optional[str]:
    """Pull the `error` field out of a Basecamp error body, if there is one."""
    if response is None:
        return None
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return None


class BasecampClient:
    """Client for the Basecamp 3 REST API."""

    def __init__(
        self,
        account_id: str,
        access_token: str,
        user_agent: str = DEFAULT_USER_AGENT,
        api_base: str = BASECAMP_API_BASE,
        timeout: float = 10.0,
    ):
        """Initialize Basecamp client.

        Args:
            account_id: Basecamp account id (first path segment of every URL).
            access_token: OAuth bearer token.
            user_agent: Sent on every request; Basecamp rejects requests without one.
            api_base: API root URL.
            timeout: Per-request timeout in seconds.
        """
        if not access_token:
            raise ValueError("Basecamp access token is required. Set BASECAMP_ACCESS_TOKEN env var.")
        self.account_id = account_id
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout
        self.headers = {
            "Authorization": f"Bearer {access_token}",
            "User-Agent": user_agent,
        }
        self.json_headers = {**self.headers, "Content-Type": "application/json"}

    @classmethod
    def from_settings(cls, settings: Settings) -> "BasecampClient":
        return cls(
            account_id=settings.account_id,
            access_token=settings.access_token,
            user_agent=settings.user_agent,
            api_base=settings.api_base,
            timeout=settings.timeout_sec,
        )

    def _url(self, path: str) -> str:
        return f"{self.api_base}/{self.account_id}/{path}"

    def _check(self, response: requests.Response, action: str) -> Any:
        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            detail = _error_detail(response)
            raise BasecampAPIError(
                f"Failed to {action}: HTTP {response.status_code}" + (f" ({detail})" if detail else ""),
                status_code=response.status_code,
                detail=detail,
            ) from e
        try:
            return response.json()
        except ValueError as e:
            raise BasecampAPIError(
                f"Failed to {action}: HTTP {response.status_code} response was not valid JSON",
                status_code=response.status_code,
            ) from e

    def _get(self, path: str, action: str) -> Any:
        try:
            response = requests.get(self._url(path), headers=self.headers, timeout=self.timeout)
        except requests.RequestException as e:
            raise BasecampAPIError(f"Network error while trying to {action}: {e}") from e
        return self._check(response, action)

    def _send(self, method: str, path: str, payload: Dict[str, Any], action: str) -> Any:
        send = requests.post if method == "POST" else requests.patch
        try:
            response = send(self._url(path), json=payload, headers=self.json_headers, timeout=self.timeout)
        except requests.RequestException as e:
            raise BasecampAPIError(f"Network error while trying to {action}: {e}") from e
        return self._check(response, action)

    def list_projects(self) -> List[DirectoryProject]:
        """Fetch all projects visible to the token."""
        data = self._get("projects.json", "list Basecamp projects")
        return [DirectoryProject.model_validate(p) for p in data]

    def list_project_people(self, project_id: BasecampId) -> List[DirectoryUser]:
        """Fetch the people on a project."""
        data = self._get(f"projects/{project_id}/people.json", f"list people on project {project_id}")
        return [DirectoryUser.model_validate(u) for u in data]

    def create_card(self, draft: TaskDraft, project_id: BasecampId, list_id: BasecampId) -> Card:
        """Create a card in a card table list.

        Raises:
            BasecampAPIError: If the request fails or returns non-2xx.
        """
        payload = {
            "title": draft.title,
            "content": draft.notes,
            "due_on": draft.due_on,
        }
        data = self._send(
            "POST",
            f"buckets/{project_id}/card_tables/lists/{list_id}/cards.json",
            payload,
            f"create card in project {project_id}",
        )
        card = Card.model_validate(data)
        logger.info(f"Card created in project {project_id}: {card.title} (ID: {card.id})")
        return card

    def update_card(
        self,
        card_id: BasecampId,
        assignee_ids: Sequence[BasecampId],
        due_on: str,
        project_id: BasecampId,
    ) -> Optional[Card]:
        """Set assignees and due date on a card.

        Returns None without calling the API when there are no assignees.
        """
        if not assignee_ids:
            logger.debug(f"No assignees for card {card_id}; skipping update")
            return None
        payload = {
            "assignee_ids": list(assignee_ids),
            "due_on": due_on,
        }
        data = self._send(
            "PATCH",
            f"buckets/{project_id}/card_tables/cards/{card_id}.json",
            payload,
            f"update card {card_id}",
        )
        card = Card.model_validate(data)
        logger.info(f"Card updated in project {project_id}: {card.title} (ID: {card.id})")
        return card
