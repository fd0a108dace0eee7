"""Static data fixtures."""

from carbon_mail.data.sample_inbox import SAMPLE_EMAILS

__all__ = ["SAMPLE_EMAILS"]
