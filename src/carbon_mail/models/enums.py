"""
Enumerations for Carbon Mail data models.

All enums are closed taxonomies - no values outside these sets are permitted.
"""

from enum import Enum


class DecisionEnum(str, Enum):
    """
    Three-way outcome of classifying one email.

    REVIEW is the conservative choice and the universal fallback whenever a
    classification cannot be completed reliably.
    """

    DELETE = "DELETE"
    KEEP = "KEEP"
    REVIEW = "REVIEW"

    @classmethod
    def values(cls) -> list[str]:
        """Wire values in declaration order."""
        return [member.value for member in cls]


class PageEnum(str, Enum):
    """Screens of the cleanup flow driven by the session transitions."""

    DASHBOARD = "dashboard"
    SCANNING = "scanning"
    REVIEW = "review"
    IMPACT = "impact"
