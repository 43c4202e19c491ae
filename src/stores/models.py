"""
Pull Request Data Models.

Snapshots read from and requests sent to the hosting platform.
Uses Pydantic for validation and serialization.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, field_validator


class PullRequestIdentity(BaseModel):
    """Owner/repo/number triple identifying a pull request."""

    model_config = ConfigDict(frozen=True)

    owner: str
    repo: str
    number: int

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


class PullRequestState(PullRequestIdentity):
    """Read-only snapshot of a pull request, fetched once per run."""

    title: str = ""
    body: str = ""
    head_branch: str

    @field_validator("title", "body", mode="before")
    @classmethod
    def none_as_empty(cls, v: Optional[str]) -> str:
        return v or ""


class UpdateRequest(PullRequestIdentity):
    """
    Fields to change on a pull request.

    Only changed fields are populated; a request with neither ``title`` nor
    ``body`` means no update call is needed.
    """

    title: Optional[str] = None
    body: Optional[str] = None

    @property
    def has_changes(self) -> bool:
        return self.title is not None or self.body is not None

    def to_edit_kwargs(self) -> Dict[str, Any]:
        """Return only the populated fields, keyed as the edit call expects."""
        return self.model_dump(include={"title", "body"}, exclude_none=True)
