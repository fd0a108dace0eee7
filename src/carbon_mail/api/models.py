"""
API-specific response models for FastAPI endpoints.

These wrap the domain models with the shapes the browser client renders.
"""

from pydantic import BaseModel, Field

from carbon_mail.models.input_models import Email
from carbon_mail.session.state import DisplayEmail


class InboxResponse(BaseModel):
    """Response for the inbox listing endpoint."""

    category: str = Field(
        description="Category the listing is restricted to",
        examples=["inbox", "primary", "spam", "promotions"]
    )
    emails: list[DisplayEmail] = Field(
        description="Visible emails in display shape"
    )
    counts: dict[str, int] = Field(
        description="Visible emails per dashboard category",
        examples=[{"inbox": 22, "primary": 10, "spam": 4, "promotions": 8}]
    )


class ScanSubsetResponse(BaseModel):
    """Emails offered to the client for one scan."""

    emails: list[Email] = Field(
        description="Emails in wire shape, ready to post to /scan"
    )
