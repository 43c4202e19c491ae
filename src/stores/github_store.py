"""
GitHub Pull Request Store Module.

Reads the triggering event payload and reads/updates pull requests through
the GitHub REST API, transforming PyGithub objects into Pydantic models.
"""

import json
from functools import cached_property
from pathlib import Path
from typing import Optional

from github import Auth, Github, GithubException
from github.PullRequest import PullRequest

from config import logger
from stores.base import PullRequestStore
from stores.models import PullRequestIdentity, PullRequestState, UpdateRequest


DEFAULT_API_URL = "https://api.github.com"


def read_event_identity(
    event_path: Optional[str], repository: Optional[str] = None
) -> Optional[PullRequestIdentity]:
    """
    Read the pull request identity from a GitHub event payload.

    Args:
        event_path (Optional[str]): Path of the event JSON file
        repository (Optional[str]): ``owner/repo`` fallback when the payload has no repository

    Returns:
        Optional[PullRequestIdentity]: None when the event carries no pull request
    """
    if not event_path or not Path(event_path).is_file():
        logger.debug({"message": "No event payload found", "event_path": event_path})
        return None

    payload = json.loads(Path(event_path).read_text(encoding="utf-8"))
    pull_request = payload.get("pull_request")
    if not pull_request:
        return None

    repo_payload = payload.get("repository") or {}
    owner = (repo_payload.get("owner") or {}).get("login")
    name = repo_payload.get("name")
    if (not owner or not name) and repository:
        owner, name = repository.split("/", 1)

    return PullRequestIdentity(owner=owner, repo=name, number=pull_request["number"])


class GitHubPullRequestStore(PullRequestStore):
    """
    GitHubPullRequestStore reads and edits pull requests with PyGithub.
    """

    def __init__(self, github_token: str, base_url: str = DEFAULT_API_URL):
        """Initialize the store with authentication.

        Args:
            github_token (str): GitHub API token for authentication.
            base_url (str): REST API root, differs on GitHub Enterprise.
        """
        self.github_token = github_token
        self.base_url = base_url

    @cached_property
    def github(self) -> Github:
        """Client created on first use, so nothing authenticates before a call."""
        return Github(auth=Auth.Token(self.github_token), base_url=self.base_url)

    def _get_pull(self, identity: PullRequestIdentity) -> PullRequest:
        return self.github.get_repo(identity.full_name).get_pull(identity.number)

    def _get_pr_state(self, pr: PullRequest, identity: PullRequestIdentity) -> PullRequestState:
        """Convert a GitHub PullRequest object to a Pydantic model.

        Args:
            pr (PullRequest): The GitHub PullRequest object.
            identity (PullRequestIdentity): Identity the pull request was read with.

        Returns:
            PullRequestState: A Pydantic model representing the PR state.
        """
        return PullRequestState(
            owner=identity.owner,
            repo=identity.repo,
            number=pr.number,
            title=pr.title,
            body=pr.body,
            head_branch=pr.head.ref,
        )

    async def get_pull_request(self, identity: PullRequestIdentity) -> PullRequestState:
        logger.debug(
            {
                "message": "Reading pull request",
                "repository": identity.full_name,
                "number": identity.number,
            }
        )
        return self._get_pr_state(self._get_pull(identity), identity)

    async def update_pull_request(self, request: UpdateRequest) -> int:
        """
        Edit the pull request with the changed fields only.

        A failed edit is reported through the returned status code, it is
        never retried.
        """
        fields = request.to_edit_kwargs()
        logger.debug(
            {
                "message": "Updating pull request",
                "repository": request.full_name,
                "number": request.number,
                "fields": sorted(fields),
            }
        )
        try:
            self._get_pull(request).edit(**fields)
        except GithubException as e:
            return e.status
        return 200
