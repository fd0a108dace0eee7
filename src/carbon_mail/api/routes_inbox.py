"""
Inbox listing endpoints backed by the static sample inbox.

The server keeps no session: the client passes the ids it already deleted
so the listing and counts match its own state.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from carbon_mail.api.dependencies import get_settings
from carbon_mail.api.models import InboxResponse, ScanSubsetResponse
from carbon_mail.config import Settings
from carbon_mail.data.sample_inbox import SAMPLE_EMAILS
from carbon_mail.session.state import ALL_CATEGORY, category_counts, visible_emails

router = APIRouter()


@router.get(
    "/emails",
    response_model=InboxResponse,
    summary="List inbox emails",
)
async def list_emails(
    category: str = ALL_CATEGORY,
    deleted: Annotated[list[str], Query(description="Ids already deleted by the client")] = [],
) -> InboxResponse:
    """
    List visible emails, optionally filtered by category.

    Args:
        category: "inbox" for everything, or a lowercased label
        deleted: Ids to hide

    Returns:
        InboxResponse with emails and per-category counts
    """
    category = category.lower()
    return InboxResponse(
        category=category,
        emails=visible_emails(SAMPLE_EMAILS, deleted, category),
        counts=category_counts(SAMPLE_EMAILS, deleted),
    )


@router.get(
    "/emails/scan-subset",
    response_model=ScanSubsetResponse,
    summary="Emails to send to POST /scan",
)
async def scan_subset(
    deleted: Annotated[list[str], Query(description="Ids already deleted by the client")] = [],
    config: Settings = Depends(get_settings),
) -> ScanSubsetResponse:
    """First SCAN_SUBSET_SIZE not-yet-deleted emails, to keep payloads small."""
    hidden = set(deleted)
    remaining = [e for e in SAMPLE_EMAILS if e.id not in hidden]
    return ScanSubsetResponse(emails=remaining[:config.SCAN_SUBSET_SIZE])
