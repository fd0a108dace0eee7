"""
Scan service: the classification boundary and its error taxonomy.
"""

from carbon_mail.service.exceptions import (
    NO_EMAILS_MESSAGE,
    InternalError,
    InvalidRequest,
    NoModelInstalled,
    ScanError,
    ServiceUnavailable,
)
from carbon_mail.service.scan_service import ScanService, resolve_model

__all__ = [
    "ScanService",
    "resolve_model",
    "ScanError",
    "InvalidRequest",
    "NO_EMAILS_MESSAGE",
    "ServiceUnavailable",
    "NoModelInstalled",
    "InternalError",
]
