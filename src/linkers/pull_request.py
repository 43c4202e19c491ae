"""
Pull Request Linking Module.

Coordinates a single linker run: reads the pull request once, decides which
fields change and issues at most one update call. Every failure is turned
into a ``RunOutcome`` here, the entry point only reports it.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from config import Settings, logger
from linkers.banner import merge_banner
from linkers.errors import ConfigurationError
from linkers.models import Configuration, RunOutcome, RunStatus
from linkers.patterns import clean_title
from linkers.ticket import compose_title, resolve_ticket
from stores.base import PullRequestStore
from stores.models import PullRequestIdentity, PullRequestState, UpdateRequest


class UpdateDecision(BaseModel):
    """Update request plus the policy violation found while deciding it."""

    model_config = ConfigDict(frozen=True)

    request: UpdateRequest
    violation: Optional[str] = None


def decide_update(state: PullRequestState, configuration: Configuration) -> UpdateDecision:
    """
    Decide the title and body changes for a pull request.

    Args:
        state (PullRequestState): Current pull request snapshot
        configuration (Configuration): Run configuration

    Returns:
        UpdateDecision: Request carrying only changed fields

    Raises:
        MalformedPatternError: If a configured pattern is invalid
    """
    cleaned_title = clean_title(state.title, configuration.clean_title_pattern)
    resolution = resolve_ticket(state.head_branch, state.title, configuration)

    new_title = None
    if resolution.ticket is not None:
        title = compose_title(cleaned_title, resolution.ticket, configuration)
        if title != cleaned_title and title != state.title:
            new_title = title

    new_body = merge_banner(state.body, configuration.preview_link, resolution.ticket)

    return UpdateDecision(
        request=UpdateRequest(
            owner=state.owner,
            repo=state.repo,
            number=state.number,
            title=new_title,
            body=new_body,
        ),
        violation=resolution.violation,
    )


class PullRequestLinker:
    """
    Links a pull request to its ticket.

    Attributes:
        store (PullRequestStore): Source and sink of pull request state.
        settings (Settings): Named inputs of the run.
    """

    def __init__(self, store: PullRequestStore, settings: Settings):
        """Initialize the linker.

        Args:
            store (PullRequestStore): Instance reading and updating pull requests.
            settings (Settings): Named inputs, converted once into a Configuration.
        """
        self.store = store
        self.settings = settings

    async def _link(
        self, identity: PullRequestIdentity, configuration: Configuration
    ) -> RunOutcome:
        state = await self.store.get_pull_request(identity)
        decision = decide_update(state, configuration)
        request = decision.request

        update_status = None
        if request.has_changes:
            update_status = await self.store.update_pull_request(request)
            if update_status != 200:
                logger.error(
                    f"Updating the pull request has failed with {update_status}"
                )
        else:
            logger.debug(
                {"message": "Pull request already up to date", "number": state.number}
            )

        if decision.violation:
            return RunOutcome(
                status=RunStatus.POLICY_VIOLATION,
                message=decision.violation,
                update_request=request,
                update_status=update_status,
            )
        return RunOutcome(
            status=RunStatus.SUCCESS,
            update_request=request,
            update_status=update_status,
        )

    async def run(self, identity: Optional[PullRequestIdentity]) -> RunOutcome:
        """
        Run the linker for the pull request of the triggering event.

        Args:
            identity (Optional[PullRequestIdentity]): None when the event has no pull request

        Returns:
            RunOutcome: Tagged outcome of the run
        """
        if identity is None:
            return RunOutcome(status=RunStatus.SUCCESS)

        try:
            configuration = self.settings.to_configuration()
        except ConfigurationError as e:
            logger.error(str(e))
            return RunOutcome(status=RunStatus.CONFIGURATION_ERROR, message=str(e))

        try:
            return await self._link(identity, configuration)
        except Exception as e:
            logger.error(
                {
                    "message": "Linking the pull request failed",
                    "repository": identity.full_name,
                    "number": identity.number,
                    "error": str(e),
                }
            )
            return RunOutcome(status=RunStatus.FAULT, message=str(e))
