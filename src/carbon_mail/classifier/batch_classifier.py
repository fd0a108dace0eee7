"""
Batched, bounded-concurrency classification of an email list.

Emails are split into consecutive groups of ``batch_size``. Calls inside a
group run concurrently; the next group starts only after every call of the
current group has settled. This caps in-flight requests to the local model
service while still overlapping latency.

Usage:
    batch = BatchClassifier(email_classifier, batch_size=5)
    results = await batch.classify_all(emails, "mistral")
"""

import asyncio
from collections.abc import Iterator, Sequence

import structlog

from carbon_mail.classifier.email_classifier import EmailClassifier
from carbon_mail.llm.exceptions import ModelServiceError
from carbon_mail.models.input_models import Email
from carbon_mail.models.output_models import Classification, ClassifiedEmail
from carbon_mail.monitoring.metrics import classifications_total

logger = structlog.get_logger(__name__)

CLASSIFICATION_FAILED_REASON = "LLM classification failed - marked for manual review."


def iter_batches(emails: Sequence[Email], batch_size: int) -> Iterator[Sequence[Email]]:
    """Yield consecutive slices of at most ``batch_size`` emails."""
    if batch_size < 1:
        raise ValueError(f"batch_size must be >= 1, got {batch_size}")
    for start in range(0, len(emails), batch_size):
        yield emails[start:start + batch_size]


class BatchClassifier:
    """
    Classify every email exactly once, never failing as a whole.

    Attributes:
        email_classifier: Single-email classifier
        batch_size: Maximum number of concurrent calls
    """

    def __init__(self, email_classifier: EmailClassifier, batch_size: int = 5):
        if batch_size < 1:
            raise ValueError(f"batch_size must be >= 1, got {batch_size}")
        self.email_classifier = email_classifier
        self.batch_size = batch_size

    async def classify_all(self, emails: Sequence[Email], model_name: str) -> list[ClassifiedEmail]:
        """
        Classify all emails in sequential groups.

        Args:
            emails: Emails to classify
            model_name: Resolved model name

        Returns:
            One ClassifiedEmail per input email, in input order. Emails whose
            call failed are marked REVIEW/0.5 for manual review.
        """
        results: list[ClassifiedEmail] = []

        for batch_number, batch in enumerate(iter_batches(emails, self.batch_size), start=1):
            logger.debug(
                "Classifying batch",
                batch_number=batch_number,
                batch_size=len(batch),
                model=model_name,
            )
            batch_results = await asyncio.gather(
                *(self._classify_isolated(email, model_name) for email in batch)
            )
            results.extend(batch_results)

        degraded = sum(
            1 for r in results if r.classification.reason == CLASSIFICATION_FAILED_REASON
        )
        logger.info(
            "Batch classification finished",
            model=model_name,
            total=len(results),
            degraded=degraded,
        )
        return results

    async def _classify_isolated(self, email: Email, model_name: str) -> ClassifiedEmail:
        """Classify one email; any failure degrades it to REVIEW."""
        try:
            classification = await self.email_classifier.classify_one(email, model_name)
        except ModelServiceError as e:
            logger.warning(
                "Classification call failed",
                email_id=email.id,
                model=model_name,
                error=e.message,
                error_type=type(e).__name__,
            )
            return self._degraded(email)
        except Exception:
            logger.exception("Unexpected error classifying email", email_id=email.id, model=model_name)
            return self._degraded(email)

        classifications_total.labels(
            decision=classification.decision.value, source="llm"
        ).inc()
        return ClassifiedEmail(email_id=email.id, classification=classification)

    @staticmethod
    def _degraded(email: Email) -> ClassifiedEmail:
        classification = Classification.review(CLASSIFICATION_FAILED_REASON)
        classifications_total.labels(
            decision=classification.decision.value, source="fallback"
        ).inc()
        return ClassifiedEmail(email_id=email.id, classification=classification)
