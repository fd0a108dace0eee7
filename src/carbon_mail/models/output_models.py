"""
Output data models for Carbon Mail.

Classification invariants (confidence in [0, 1], reason at most 200 chars)
are enforced by the model itself, so every construction path - parsed model
output or a fallback - yields a well-formed record.
"""

import math

from pydantic import BaseModel, ConfigDict, Field, field_validator

from carbon_mail.models.enums import DecisionEnum

REASON_MAX_LENGTH = 200
DEFAULT_CONFIDENCE = 0.5


class Classification(BaseModel):
    """Validated DELETE/KEEP/REVIEW decision for one email."""

    model_config = ConfigDict(frozen=True)

    decision: DecisionEnum = Field(..., description="DELETE, KEEP or REVIEW")
    confidence: float = Field(..., description="Model confidence, clamped to [0, 1]")
    reason: str = Field(..., description="Single-sentence justification (max 200 chars)")

    @field_validator("confidence", mode="after")
    @classmethod
    def _clamp_confidence(cls, value: float) -> float:
        if math.isnan(value):
            return DEFAULT_CONFIDENCE
        return max(0.0, min(1.0, value))

    @field_validator("reason", mode="after")
    @classmethod
    def _truncate_reason(cls, value: str) -> str:
        return value[:REASON_MAX_LENGTH]

    @classmethod
    def review(cls, reason: str) -> "Classification":
        """Degraded REVIEW/0.5 classification used by every fallback path."""
        return cls(decision=DecisionEnum.REVIEW, confidence=DEFAULT_CONFIDENCE, reason=reason)


class ClassifiedEmail(BaseModel):
    """Pairs an email identifier with its classification."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    email_id: str = Field(..., alias="emailId", description="Identifier of the classified email")
    classification: Classification


class HealthStatus(BaseModel):
    """Availability of the local model service and its installed models."""

    available: bool = Field(..., description="Whether GET /api/tags succeeded")
    models: list[str] = Field(
        default_factory=list,
        description="Installed model names, in the order the service reports them",
    )

    @classmethod
    def unavailable(cls) -> "HealthStatus":
        return cls(available=False, models=[])


class ScanResponse(BaseModel):
    """Successful ``POST /scan`` response."""

    model_config = ConfigDict(populate_by_name=True)

    results: list[ClassifiedEmail]
    model: str = Field(..., description="Model actually used (after fallback)")
    total_processed: int = Field(..., ge=0, alias="totalProcessed")
