"""
Linker Error Types.

Errors raised while linking a pull request to its ticket. They are turned
into run outcomes by ``PullRequestLinker.run``; nothing catches them earlier.
"""

from typing import List


class PullRequestLinkerError(Exception):
    """Base class for all linker errors."""


class MalformedPatternError(PullRequestLinkerError):
    """A configured pattern has invalid regex text or flags."""


class ConfigurationError(PullRequestLinkerError):
    """One or more required inputs are missing."""

    def __init__(self, missing_inputs: List[str]):
        self.missing_inputs = missing_inputs
        plural = "s" if len(missing_inputs) > 1 else ""
        super().__init__(
            f"Missing required input{plural}: {', '.join(missing_inputs)}"
        )
