"""
Main Application Entry Point.

Links the pull request of the triggering GitHub event to its Jira ticket:
- Reading the event payload
- Rewriting the title with the ticket id
- Maintaining the preview/ticket banner in the body
- Reporting the run outcome through the exit code

Run it inside a workflow with ``python src/app.py``.
"""

import asyncio
import sys

from config import settings, logger
from linkers.pull_request import PullRequestLinker
from stores.base import PullRequestStore
from stores.github_store import GitHubPullRequestStore, read_event_identity


async def main() -> int:
    """
    Execute a linker run and return the process exit code.

    Returns:
        int: 1 when the run failed (policy violation or fault), 0 otherwise

    Note:
        - Missing required inputs are reported at error level but do not
          fail the run
        - A failed update call is logged and does not fail the run
    """
    identity = read_event_identity(
        settings.github_event_path, settings.github_repository
    )
    if identity is None:
        logger.debug("Event carries no pull request, nothing to do")
        return 0

    store: PullRequestStore = GitHubPullRequestStore(
        settings.github_token.get_secret_value(), settings.github_api_url
    )
    outcome = await PullRequestLinker(store, settings).run(identity)

    if outcome.failed:
        logger.error(outcome.message)
        return 1
    return 0


def run() -> None:
    try:
        sys.exit(asyncio.run(main()))
    except Exception as e:
        logger.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    run()
