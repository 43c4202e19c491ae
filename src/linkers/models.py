"""
Linker Data Models.

Immutable values shared by the linking pipeline: the run configuration,
the resolved ticket and the outcome reported back to the entry point.
Uses Pydantic for validation.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, computed_field

from stores.models import UpdateRequest


JIRA_LINK_TEMPLATE = "https://{account}.atlassian.net/browse/{ticket_id}"


class PatternSpec(BaseModel):
    """Regex text plus its one-letter flags, compiled at the point of use."""

    model_config = ConfigDict(frozen=True)

    pattern: str
    flags: str = ""

    def __str__(self) -> str:
        return f"/{self.pattern}/{self.flags}"


class Configuration(BaseModel):
    """
    Run configuration, built once from the named inputs.

    Attributes:
        ticket_pattern (PatternSpec): Pattern identifying a ticket id
        exception_pattern (Optional[PatternSpec]): Branches exempt from the ticket policy
        clean_title_pattern (Optional[PatternSpec]): Noise removed from the title
        jira_account (str): Atlassian account used to build ticket links
        preview_link (Optional[str]): Preview deployment URL for the banner
        fail_if_no_ticket (bool): Fail the run when no ticket is found
    """

    model_config = ConfigDict(frozen=True)

    ticket_pattern: PatternSpec
    exception_pattern: Optional[PatternSpec] = None
    clean_title_pattern: Optional[PatternSpec] = None
    jira_account: str
    preview_link: Optional[str] = None
    fail_if_no_ticket: bool = False


class TicketReference(BaseModel):
    """A ticket id and its link in the issue tracker."""

    model_config = ConfigDict(frozen=True)

    ticket_id: str
    jira_account: str

    @computed_field
    @property
    def link(self) -> str:
        return JIRA_LINK_TEMPLATE.format(
            account=self.jira_account, ticket_id=self.ticket_id
        )


class TicketResolution(BaseModel):
    """Result of looking for a ticket in the branch name and title."""

    model_config = ConfigDict(frozen=True)

    ticket: Optional[TicketReference] = None
    is_exception: bool = False
    violation: Optional[str] = None


class RunStatus(Enum):
    """
    Outcome of a linker run.

    Attributes:
        SUCCESS: Run completed, with or without an update
        CONFIGURATION_ERROR: Required inputs were missing, nothing was read
        POLICY_VIOLATION: No ticket found while one is required
        FAULT: Unexpected error, including malformed patterns
    """

    SUCCESS = "success"
    CONFIGURATION_ERROR = "configuration_error"
    POLICY_VIOLATION = "policy_violation"
    FAULT = "fault"


class RunOutcome(BaseModel):
    """Tagged result of a run, reported once by the entry point."""

    model_config = ConfigDict(frozen=True)

    status: RunStatus
    message: str = ""
    update_request: Optional[UpdateRequest] = None
    update_status: Optional[int] = None

    @property
    def failed(self) -> bool:
        return self.status in (RunStatus.POLICY_VIOLATION, RunStatus.FAULT)
