"""
GitHub Store Test Suite.

Covers reading the event payload and the PyGithub-backed read/update calls.
"""

import json

import pytest
from unittest.mock import Mock, patch
from github import GithubException

from stores.github_store import GitHubPullRequestStore, read_event_identity
from stores.models import PullRequestIdentity, UpdateRequest


@pytest.fixture
def event_file(tmp_path):
    """Write an event payload and return its path."""

    def _event_file(payload):
        path = tmp_path / "event.json"
        path.write_text(json.dumps(payload))
        return str(path)

    return _event_file


@pytest.fixture
def mock_pull():
    """Mock PyGithub pull request."""
    pull = Mock()
    pull.number = 42
    pull.title = "Add login"
    pull.body = None
    pull.head.ref = "feature/ABC-123-login"
    return pull


@pytest.fixture
def store(mock_pull):
    """Create a store whose client returns the mocked pull request."""
    with patch("stores.github_store.Github") as mock_github:
        mock_github.return_value.get_repo.return_value.get_pull.return_value = mock_pull
        yield GitHubPullRequestStore("token")


def test_store_created_without_token():
    """No client is built, and no token is checked, until the first call."""
    with patch("stores.github_store.Github") as mock_github:
        GitHubPullRequestStore("")
    mock_github.assert_not_called()


def test_read_event_identity(event_file):
    """Identity comes from the pull request and repository of the event."""
    path = event_file(
        {
            "pull_request": {"number": 42},
            "repository": {"name": "shop", "owner": {"login": "acme"}},
        }
    )

    assert read_event_identity(path) == PullRequestIdentity(
        owner="acme", repo="shop", number=42
    )


def test_read_event_identity_repository_fallback(event_file):
    """GITHUB_REPOSITORY is used when the payload has no repository."""
    path = event_file({"pull_request": {"number": 7}})

    identity = read_event_identity(path, "acme/shop")

    assert identity.full_name == "acme/shop"
    assert identity.number == 7


def test_read_event_without_pull_request(event_file):
    """Events without a pull request yield no identity."""
    assert read_event_identity(event_file({"push": {}}), "acme/shop") is None


def test_read_event_missing_file(tmp_path):
    """A missing payload yields no identity."""
    assert read_event_identity(str(tmp_path / "missing.json")) is None
    assert read_event_identity(None) is None


@pytest.mark.asyncio
async def test_get_pull_request(store):
    """PyGithub objects are converted to a snapshot, None body as empty."""
    identity = PullRequestIdentity(owner="acme", repo="shop", number=42)

    state = await store.get_pull_request(identity)

    store.github.get_repo.assert_called_once_with("acme/shop")
    store.github.get_repo.return_value.get_pull.assert_called_once_with(42)
    assert state.title == "Add login"
    assert state.body == ""
    assert state.head_branch == "feature/ABC-123-login"


@pytest.mark.asyncio
async def test_update_pull_request_sends_changed_fields(store, mock_pull):
    """Only populated fields are sent."""
    request = UpdateRequest(owner="acme", repo="shop", number=42, title="ABC-1: x")

    status = await store.update_pull_request(request)

    assert status == 200
    mock_pull.edit.assert_called_once_with(title="ABC-1: x")


@pytest.mark.asyncio
async def test_update_pull_request_failure_status(store, mock_pull):
    """A rejected edit is reported through its status code."""
    mock_pull.edit.side_effect = GithubException(403, {"message": "Forbidden"}, None)
    request = UpdateRequest(owner="acme", repo="shop", number=42, body="b")

    assert await store.update_pull_request(request) == 403
