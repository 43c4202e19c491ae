"""
Abstract Base Class for Pull Request Stores.

Defines the interface used by the linker to read and update pull requests.
Hosting platform implementations (GitHub, ...) should implement it.
"""

from abc import ABC, abstractmethod

from stores.models import PullRequestIdentity, PullRequestState, UpdateRequest


class PullRequestStore(ABC):
    """
    Abstract base class for pull request stores.

    Implementations should handle:
    - Authentication with the hosting platform
    - Transforming platform objects to the common models
    """

    @abstractmethod
    async def get_pull_request(self, identity: PullRequestIdentity) -> PullRequestState:
        """
        Read the current state of a pull request.

        Args:
            identity (PullRequestIdentity): Pull request to read

        Returns:
            PullRequestState: Snapshot of the pull request
        """
        pass

    @abstractmethod
    async def update_pull_request(self, request: UpdateRequest) -> int:
        """
        Apply an update to a pull request.

        Args:
            request (UpdateRequest): Changed fields

        Returns:
            int: Status code of the update call, 200 on success
        """
        pass
