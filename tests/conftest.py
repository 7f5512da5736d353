"""Pytest fixtures and configuration for cardbridge tests."""

import pytest
from unittest.mock import MagicMock, patch
import requests
from fastapi.testclient import TestClient

from cardbridge.config import Settings
from cardbridge.context import build_context
from cardbridge.integrations.basecamp import BasecampClient
from cardbridge.models.directory import DirectoryProject, DirectoryUser


def make_response(status_code: int = 200, body=None):
    """Build a fake requests.Response."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.json.return_value = body
    if status_code >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(
            f"{status_code} Client Error", response=resp
        )
    else:
        resp.raise_for_status.return_value = None
    return resp


@pytest.fixture
def settings():
    """Settings pointing at a fake account (no network is used)."""
    return Settings(
        account_id="999",
        project_id="100",
        list_id="200",
        access_token="test_access_token_value",
        user_agent="cardbridge-tests (tests@example.com)",
    )


@pytest.fixture
def people_payload():
    """Raw people.json body."""
    return [
        {"id": 1, "name": "John Smith", "email_address": "john@example.com"},
        {"id": 2, "name": "Jane Doe", "email_address": "jane@example.com"},
        {"id": 3, "name": "Alice Wong", "email_address": "alice@example.com"},
    ]


@pytest.fixture
def projects_payload():
    """Raw projects.json body."""
    return [
        {"id": 500, "name": "Truva", "status": "active"},
        {"id": 501, "name": "Internal Ops", "status": "active"},
    ]


@pytest.fixture
def users(people_payload):
    return [DirectoryUser.model_validate(u) for u in people_payload]


@pytest.fixture
def projects(projects_payload):
    return [DirectoryProject.model_validate(p) for p in projects_payload]


@pytest.fixture
def basecamp_client(settings):
    """A real BasecampClient; tests patch `requests` to intercept calls."""
    return BasecampClient.from_settings(settings)


@pytest.fixture
def context(settings, basecamp_client):
    """A fresh service context per test (caches start cold)."""
    return build_context(settings, client=basecamp_client)


@pytest.fixture
def mock_requests(people_payload, projects_payload):
    """Patch outbound HTTP in the Basecamp integration.

    GETs answer with the people/projects fixtures; POST returns a created card;
    PATCH returns the updated card. Tests may override any return value.
    """
    def fake_get(url, **kwargs):
        if url.endswith("/projects.json"):
            return make_response(200, projects_payload)
        if url.endswith("/people.json"):
            return make_response(200, people_payload)
        return make_response(404, {"error": "Not found"})

    with patch("cardbridge.integrations.basecamp.requests.get", side_effect=fake_get) as get, patch(
        "cardbridge.integrations.basecamp.requests.post",
        return_value=make_response(201, {"id": 4242, "title": "Created card"}),
    ) as post, patch(
        "cardbridge.integrations.basecamp.requests.patch",
        return_value=make_response(200, {"id": 4242, "title": "Created card"}),
    ) as patch_:
        yield MagicMock(get=get, post=post, patch=patch_)


@pytest.fixture
def test_client(context):
    """Create a FastAPI test client with the service context overridden."""
    from cardbridge.api.app import app
    from cardbridge.api.dependencies import get_context_provider

    app.dependency_overrides[get_context_provider] = lambda: (lambda: context)

    with TestClient(app) as client:
        yield client

    # Clean up dependency overrides
    app.dependency_overrides.clear()


@pytest.fixture
def fake_response():
    """Factory for fake requests.Response objects."""
    return make_response
