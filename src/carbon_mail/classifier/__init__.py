"""
Email classification orchestration.

- EmailClassifier: one email, one chat call, parsed answer
- BatchClassifier: fixed-size sequential groups with per-email failure isolation
"""

from carbon_mail.classifier.batch_classifier import (
    CLASSIFICATION_FAILED_REASON,
    BatchClassifier,
    iter_batches,
)
from carbon_mail.classifier.email_classifier import EmailClassifier

__all__ = [
    "EmailClassifier",
    "BatchClassifier",
    "iter_batches",
    "CLASSIFICATION_FAILED_REASON",
]
