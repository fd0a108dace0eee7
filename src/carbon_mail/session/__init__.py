"""
Cleanup session: immutable state plus pure transitions per user action.
"""

from carbon_mail.session.state import (
    DisplayEmail,
    InboxState,
    LifetimeImpact,
    ScannedEmail,
    apply_scan_results,
    back_to_dashboard,
    category_counts,
    confirm_deletion,
    deletable_emails,
    display_category,
    scan_failed,
    start_scan,
    toggle_selection,
    visible_emails,
)

__all__ = [
    "InboxState",
    "LifetimeImpact",
    "DisplayEmail",
    "ScannedEmail",
    "display_category",
    "visible_emails",
    "category_counts",
    "start_scan",
    "scan_failed",
    "apply_scan_results",
    "deletable_emails",
    "toggle_selection",
    "confirm_deletion",
    "back_to_dashboard",
]
