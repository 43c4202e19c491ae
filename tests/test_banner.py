"""
Body Banner Test Suite.

Covers inserting, replacing and keeping the preview/ticket banner.
"""

import pytest

from linkers.banner import merge_banner
from linkers.models import TicketReference


PREVIEW = "https://preview.example/42"
PREVIEW_LINE = f"**[Preview]({PREVIEW})**\n"
TICKET_LINE = "**[ABC-123](https://acme.atlassian.net/browse/ABC-123)**\n"


@pytest.fixture
def ticket():
    """Create a resolved ticket."""
    return TicketReference(ticket_id="ABC-123", jira_account="acme")


def test_empty_body_gets_full_banner(ticket):
    """Both lines and a blank line are written to an empty body."""
    assert merge_banner("", PREVIEW, ticket) == f"{PREVIEW_LINE}{TICKET_LINE}\n"


def test_banner_separated_from_existing_content(ticket):
    """Existing content is kept below exactly one blank line."""
    body = merge_banner("Some description", None, ticket)
    assert body == f"{TICKET_LINE}\nSome description"


def test_merge_is_idempotent(ticket):
    """Merging an already merged body reports no change."""
    merged = merge_banner("Some description\n\nMore", PREVIEW, ticket)
    assert merge_banner(merged, PREVIEW, ticket) is None


def test_existing_banner_unchanged(ticket):
    """A body already starting with the banner is left alone."""
    body = f"{PREVIEW_LINE}{TICKET_LINE}\nexisting content"
    assert merge_banner(body, PREVIEW, ticket) is None


def test_no_preview_and_no_ticket_leaves_body_untouched():
    """Without banner lines the body is never modified."""
    assert merge_banner("**[Preview](old)**\n\nbody", None, None) is None


def test_preview_link_updated(ticket):
    """A preview line with another URL is replaced."""
    body = f"**[Preview](https://preview.example/1)**\n{TICKET_LINE}\nexisting"
    assert merge_banner(body, PREVIEW, ticket) == (
        f"{PREVIEW_LINE}{TICKET_LINE}\nexisting"
    )


def test_preview_only_banner():
    """The preview line alone is a valid banner."""
    assert merge_banner("body", PREVIEW, None) == f"{PREVIEW_LINE}\nbody"


def test_stale_ticket_line_replaced(ticket):
    """A banner left by a previous ticket is replaced, not stacked."""
    body = (
        f"{PREVIEW_LINE}"
        "**[OLD-1](https://acme.atlassian.net/browse/OLD-1)**\n"
        "\nexisting"
    )
    assert merge_banner(body, PREVIEW, ticket) == (
        f"{PREVIEW_LINE}{TICKET_LINE}\nexisting"
    )


def test_content_below_banner_not_touched(ticket):
    """Ticket-looking lines below the banner are kept."""
    body = f"{TICKET_LINE}\nSee **[ABC-123](elsewhere)**\n"
    assert merge_banner(body, None, ticket) is None
