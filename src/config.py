"""
Application Configuration Module.

Manages the linker's named inputs using Pydantic for validation.
Inputs are read from the environment the way GitHub Actions passes them
(``INPUT_<NAME>``), with plain upper-case names accepted as well.

Features:
- Environment variable loading and validation
- Secure credential management
- Required input checks
- Conversion to the immutable run configuration
"""

from typing import List, Optional

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from logger import LogManager
from linkers.errors import ConfigurationError
from linkers.models import Configuration, PatternSpec


def _input(name: str) -> AliasChoices:
    """Accept both the action input variable and its plain variant."""
    return AliasChoices(f"INPUT_{name.upper()}", name.upper().replace("-", "_"))


class Settings(BaseSettings):
    """
    Application configuration settings with validation.

    Attributes:
        app_name (str): Name of the application
        dev (bool): Debug mode flag
        log_dir (Optional[str]): Directory for log files, disabled when empty
        log_level (int): Logging level (default: info)
        github_token (SecretStr): GitHub API authentication token
        github_api_url (str): GitHub REST API root
        github_event_path (Optional[str]): Path of the triggering event payload
        github_repository (Optional[str]): ``owner/repo`` of the workflow run
        jira_account (str): Atlassian account name
        ticket_regex (str): Pattern identifying a ticket id
        fail_if_no_ticket (str): ``"true"`` to fail when no ticket is found
    """

    # Application settings
    app_name: str = Field(default="pr-ticket-linker", description="Application name")
    dev: bool = Field(default=False, description="Debug mode")
    log_dir: Optional[str] = Field(default=None, description="Logging directory")
    log_level: int = Field(default=20, description="Logging level, default info")

    # GitHub configuration
    github_token: SecretStr = Field(
        default=SecretStr(""),
        validation_alias=_input("github-token"),
        description="GitHub token",
    )
    github_api_url: str = Field(
        default="https://api.github.com",
        validation_alias=AliasChoices("GITHUB_API_URL"),
        description="GitHub REST API root",
    )
    github_event_path: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("GITHUB_EVENT_PATH"),
        description="Path of the event payload",
    )
    github_repository: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("GITHUB_REPOSITORY"),
        description="owner/repo of the workflow run",
    )

    # Linker inputs
    jira_account: str = Field(default="", validation_alias=_input("jira-account"))
    ticket_regex: str = Field(default="", validation_alias=_input("ticket-regex"))
    ticket_regex_flags: str = Field(
        default="", validation_alias=_input("ticket-regex-flags")
    )
    exception_regex: str = Field(default="", validation_alias=_input("exception-regex"))
    exception_regex_flags: str = Field(
        default="", validation_alias=_input("exception-regex-flags")
    )
    clean_title_regex: str = Field(
        default="", validation_alias=_input("clean-title-regex")
    )
    clean_title_regex_flags: str = Field(
        default="", validation_alias=_input("clean-title-regex-flags")
    )
    preview_link: str = Field(default="", validation_alias=_input("preview-link"))
    fail_if_no_ticket: str = Field(
        default="", validation_alias=_input("fail-if-no-ticket")
    )

    def missing_required_inputs(self) -> List[str]:
        """
        List the required inputs that were not provided.

        Returns:
            List[str]: Input names, in declaration order
        """
        required = {
            "jira-account": self.jira_account,
            "ticket-regex": self.ticket_regex,
        }
        return [name for name, value in required.items() if not value]

    def to_configuration(self) -> Configuration:
        """
        Build the immutable run configuration.

        Returns:
            Configuration: Configuration consumed by the linker components

        Raises:
            ConfigurationError: If required inputs are missing
        """
        missing = self.missing_required_inputs()
        if missing:
            raise ConfigurationError(missing)

        def pattern(text: str, flags: str) -> Optional[PatternSpec]:
            return PatternSpec(pattern=text, flags=flags) if text else None

        return Configuration(
            ticket_pattern=PatternSpec(
                pattern=self.ticket_regex, flags=self.ticket_regex_flags
            ),
            exception_pattern=pattern(self.exception_regex, self.exception_regex_flags),
            clean_title_pattern=pattern(
                self.clean_title_regex, self.clean_title_regex_flags
            ),
            jira_account=self.jira_account,
            preview_link=self.preview_link or None,
            fail_if_no_ticket=self.fail_if_no_ticket == "true",
        )

    # Configure env file loading
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",  # Ignore extra fields in .env file
    )


# Create global settings instance
settings = Settings()

# Initialize logging configuration
logger = LogManager(
    app_name=settings.app_name.lower(),
    log_dir=settings.log_dir,
    development=settings.dev,
    level=settings.log_level,
).logger
