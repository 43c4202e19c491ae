"""
Ticket Resolution Module.

Finds the ticket a pull request belongs to and composes the ticket-prefixed
title. The branch name is the preferred source: it is set once when the
branch is created, while titles get edited.
"""

from typing import Optional

from config import logger
from linkers.models import Configuration, TicketReference, TicketResolution
from linkers.patterns import compile_pattern, match_first


def resolve_ticket(
    head_branch: str, raw_title: str, configuration: Configuration
) -> TicketResolution:
    """
    Resolve the ticket from the branch name, falling back to the title.

    Args:
        head_branch (str): Name of the pull request's head branch
        raw_title (str): Title before cleaning
        configuration (Configuration): Run configuration

    Returns:
        TicketResolution: The ticket, or the exception/violation state when none was found
    """
    ticket_in_branch = match_first(head_branch, configuration.ticket_pattern)
    ticket_in_title = match_first(raw_title, configuration.ticket_pattern)

    if ticket_in_branch:
        logger.info(f"Found ticket {ticket_in_branch} in branch name")
    if ticket_in_title:
        logger.info(f"Found ticket {ticket_in_title} in pull request title")

    ticket_id = ticket_in_branch or ticket_in_title
    if ticket_id:
        logger.info(f"Using ticket {ticket_id}")
        return TicketResolution(
            ticket=TicketReference(
                ticket_id=ticket_id, jira_account=configuration.jira_account
            )
        )

    if (
        configuration.exception_pattern is not None
        and match_first(head_branch, configuration.exception_pattern) is not None
    ):
        logger.info(f"Branch {head_branch} is exempt from the ticket requirement")
        return TicketResolution(is_exception=True)

    if configuration.fail_if_no_ticket:
        return TicketResolution(
            violation=(
                "Neither current branch nor title contain a Jira ticket "
                f"matching {configuration.ticket_pattern}."
            )
        )
    return TicketResolution()


def compose_title(
    cleaned_title: str,
    ticket: Optional[TicketReference],
    configuration: Configuration,
) -> str:
    """
    Prefix the cleaned title with the ticket id unless it already has one.

    Args:
        cleaned_title (str): Title after noise removal
        ticket (Optional[TicketReference]): Resolved ticket
        configuration (Configuration): Run configuration

    Returns:
        str: Final title
    """
    if ticket is None:
        return cleaned_title

    if compile_pattern(configuration.ticket_pattern).search(cleaned_title):
        logger.info("Title already contains a Jira ticket")
        return cleaned_title

    title = f"{ticket.ticket_id}: {cleaned_title}"
    logger.info(f"Updating pull request title to {title}")
    return title
