"""
Input data models for Carbon Mail.

These models represent the emails sent by the browser client (or taken from
the in-memory inbox fixture) and the body of a scan request.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Sender(BaseModel):
    """Email sender. A bare string on the wire is read as the display name."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(..., description="Display name of the sender")
    email: Optional[str] = Field(default=None, description="Sender address")

    @model_validator(mode="before")
    @classmethod
    def _from_plain_string(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"name": data}
        return data

    def __str__(self) -> str:
        if self.email:
            return f"{self.name} <{self.email}>"
        return self.name


class Email(BaseModel):
    """
    Email as seen by the classification pipeline.

    Externally owned and read-only: passed by value into a scan and never
    mutated. ``id`` must be unique within one request since results are
    correlated by identifier.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    id: str = Field(..., min_length=1, description="Identifier, unique within a request")
    sender: Sender = Field(..., alias="from", description="Sender name and address")
    subject: str = Field(default="", description="Subject line")
    body: str = Field(default="", description="Plain text body")
    labels: list[str] = Field(
        default_factory=list,
        description="Mailbox labels (Spam, Promotions, Primary, ...)",
    )
    date: Optional[str] = Field(default=None, description="Sent date as provided by the source")
    read: bool = Field(default=False, description="Whether the email was opened")
    has_attachment: bool = Field(default=False, description="Whether the email carries attachments")
    size_kb: float = Field(default=0.0, ge=0.0, alias="sizeKB", description="Approximate size in KB")

    def to_prompt_payload(self) -> dict[str, Any]:
        """Fields sent to the model, in the order the prompt presents them."""
        return {
            "id": self.id,
            "from": self.sender.model_dump(exclude_none=True),
            "subject": self.subject,
            "body": self.body,
            "labels": list(self.labels),
            "date": self.date,
            "has_attachment": self.has_attachment,
            "read": self.read,
        }


class ScanRequest(BaseModel):
    """Body of ``POST /scan``."""

    model_config = ConfigDict(extra="ignore")

    emails: Optional[list[Email]] = Field(
        default=None,
        description="Emails to classify (must be non-empty)",
    )
    model: Optional[str] = Field(
        default=None,
        description="Requested Ollama model; falls back to the first installed model",
    )
