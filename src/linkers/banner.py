"""
Body Banner Module.

Maintains the machine-managed banner at the top of a pull request body:

    **[Preview](<preview link>)**
    **[<ticket id>](<ticket link>)**
    <blank line>
    <rest of the body>

Both lines are optional. Only the leading banner region is ever rewritten.
"""

import re
from typing import Optional

from linkers.models import TicketReference, JIRA_LINK_TEMPLATE


PREVIEW_LINK_TEXT = "Preview"


def preview_line(preview_link: Optional[str]) -> str:
    return f"**[{PREVIEW_LINK_TEXT}]({preview_link})**\n" if preview_link else ""


def ticket_line(ticket: Optional[TicketReference]) -> str:
    return f"**[{ticket.ticket_id}]({ticket.link})**\n" if ticket else ""


def _banner_pattern(ticket: Optional[TicketReference]) -> re.Pattern:
    """
    Pattern matching the existing banner region at the start of the body.

    The ticket line matches the current ticket id, or any ticket line linking
    to the same tracker account so a banner left by a previous ticket is
    replaced.
    """
    ticket_alternatives = []
    if ticket is not None:
        ticket_alternatives.append(re.escape(f"**[{ticket.ticket_id}]") + r"[^\n]+\n")
        tracker_prefix = JIRA_LINK_TEMPLATE.format(
            account=ticket.jira_account, ticket_id=""
        )
        ticket_alternatives.append(
            r"\*\*\[[^\]\n]+\]\(" + re.escape(tracker_prefix) + r"[^\n]*\n"
        )

    pattern = r"\A(\*\*\[" + re.escape(PREVIEW_LINK_TEXT) + r"\][^\n]+\n)?"
    if ticket_alternatives:
        pattern += "(" + "|".join(ticket_alternatives) + ")?"
    return re.compile(pattern + r"\n?")


def merge_banner(
    body: str, preview_link: Optional[str], ticket: Optional[TicketReference]
) -> Optional[str]:
    """
    Insert or replace the banner at the top of the body.

    Args:
        body (str): Current pull request body
        preview_link (Optional[str]): Preview deployment URL
        ticket (Optional[TicketReference]): Resolved ticket

    Returns:
        Optional[str]: New body, or None when the body does not change
    """
    if not preview_link and ticket is None:
        return None

    replacement = f"{preview_line(preview_link)}{ticket_line(ticket)}\n"
    match = _banner_pattern(ticket).match(body)
    if match.group(0) == replacement:
        return None

    return replacement + body[match.end():]
