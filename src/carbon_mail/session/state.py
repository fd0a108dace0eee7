"""
Cleanup session state and its transitions.

The browser flow (dashboard -> scanning -> review -> impact) is modelled as
an immutable ``InboxState`` plus one pure function per user action. Each
transition returns a new state and never mutates its input, so the client
(or a test) can hold any number of snapshots.
"""

from collections.abc import Iterable, Sequence

from pydantic import BaseModel, ConfigDict, Field

from carbon_mail.models.enums import DecisionEnum, PageEnum
from carbon_mail.models.input_models import Email
from carbon_mail.models.output_models import DEFAULT_CONFIDENCE, ClassifiedEmail

ALL_CATEGORY = "inbox"
DASHBOARD_CATEGORIES = ("inbox", "primary", "spam", "promotions")
CO2_GRAMS_PER_KB = 0.0001
MISSING_RESULT_REASON = "No reason provided"


class LifetimeImpact(BaseModel):
    """Cumulative savings shown on the dashboard and impact screens."""

    model_config = ConfigDict(frozen=True)

    co2: float = Field(default=2.3, ge=0.0, description="Approximate CO2 saved, in grams")
    storage_kb: float = Field(default=75.0, ge=0.0, description="Storage freed, in KB")


class DisplayEmail(BaseModel):
    """Flattened email used by the inbox listing."""

    model_config = ConfigDict(frozen=True)

    id: str
    sender: str
    subject: str
    category: str
    read: bool
    size_kb: float
    body: str


class ScannedEmail(DisplayEmail):
    """Display email merged with its classification."""

    decision: DecisionEnum
    confidence: float
    reason: str


class InboxState(BaseModel):
    """Snapshot of one cleanup session."""

    model_config = ConfigDict(frozen=True)

    page: PageEnum = PageEnum.DASHBOARD
    scanned_emails: tuple[ScannedEmail, ...] = ()
    selected_ids: frozenset[str] = frozenset()
    deleted_ids: frozenset[str] = frozenset()
    impact: LifetimeImpact = Field(default_factory=LifetimeImpact)


def display_category(email: Email) -> str:
    """First label, lowercased; unlabelled emails live in the inbox."""
    if email.labels and email.labels[0]:
        return str(email.labels[0]).lower()
    return ALL_CATEGORY


def to_display_email(email: Email) -> DisplayEmail:
    return DisplayEmail(
        id=email.id,
        sender=email.sender.name,
        subject=email.subject,
        category=display_category(email),
        read=email.read,
        size_kb=email.size_kb,
        body=email.body,
    )


def visible_emails(
    emails: Iterable[Email],
    deleted_ids: Iterable[str] = (),
    category: str = ALL_CATEGORY,
) -> list[DisplayEmail]:
    """Emails not yet deleted, optionally restricted to one category."""
    deleted = set(deleted_ids)
    visible = [to_display_email(e) for e in emails if e.id not in deleted]
    if category == ALL_CATEGORY:
        return visible
    return [e for e in visible if e.category == category]


def category_counts(emails: Iterable[Email], deleted_ids: Iterable[str] = ()) -> dict[str, int]:
    """Per-category counts for the dashboard tabs."""
    visible = visible_emails(emails, deleted_ids)
    counts = {name: 0 for name in DASHBOARD_CATEGORIES}
    counts[ALL_CATEGORY] = len(visible)
    for email in visible:
        if email.category in counts and email.category != ALL_CATEGORY:
            counts[email.category] += 1
    return counts


def start_scan(state: InboxState) -> InboxState:
    return state.model_copy(update={"page": PageEnum.SCANNING})


def scan_failed(state: InboxState) -> InboxState:
    """A failed scan returns to the dashboard with previous results untouched."""
    return state.model_copy(update={"page": PageEnum.DASHBOARD})


def apply_scan_results(
    state: InboxState,
    emails: Sequence[Email],
    results: Iterable[ClassifiedEmail],
) -> InboxState:
    """
    Merge classifications into the scanned emails and open the review page.

    Results are matched by email id. An email without a result is shown as
    REVIEW/0.5. Every DELETE is preselected for deletion.
    """
    by_id = {r.email_id: r.classification for r in results}
    scanned = []
    for email in emails:
        classification = by_id.get(email.id)
        scanned.append(
            ScannedEmail(
                **to_display_email(email).model_dump(),
                decision=classification.decision if classification else DecisionEnum.REVIEW,
                confidence=classification.confidence if classification else DEFAULT_CONFIDENCE,
                reason=classification.reason if classification else MISSING_RESULT_REASON,
            )
        )

    return state.model_copy(
        update={
            "page": PageEnum.REVIEW,
            "scanned_emails": tuple(scanned),
            "selected_ids": frozenset(e.id for e in scanned if e.decision == DecisionEnum.DELETE),
        }
    )


def deletable_emails(state: InboxState) -> list[ScannedEmail]:
    """Emails the model suggested deleting, as listed on the review page."""
    return [e for e in state.scanned_emails if e.decision == DecisionEnum.DELETE]


def toggle_selection(state: InboxState, email_id: str) -> InboxState:
    selected = set(state.selected_ids)
    if email_id in selected:
        selected.remove(email_id)
    else:
        selected.add(email_id)
    return state.model_copy(update={"selected_ids": frozenset(selected)})


def selected_size_kb(state: InboxState) -> float:
    sizes = {e.id: e.size_kb for e in state.scanned_emails}
    return sum(sizes.get(email_id, 0.0) for email_id in state.selected_ids)


def confirm_deletion(state: InboxState) -> InboxState:
    """
    Delete the selected emails and credit their size to the impact counters.

    CO2 grows by ``size_kb * 0.0001`` and storage by ``size_kb`` for every
    selected email. The selection is kept so the impact page can show its
    count.
    """
    total_kb = selected_size_kb(state)
    impact = LifetimeImpact(
        co2=state.impact.co2 + total_kb * CO2_GRAMS_PER_KB,
        storage_kb=state.impact.storage_kb + total_kb,
    )
    return state.model_copy(
        update={
            "page": PageEnum.IMPACT,
            "impact": impact,
            "deleted_ids": state.deleted_ids | state.selected_ids,
        }
    )


def back_to_dashboard(state: InboxState, clear_selection: bool = False) -> InboxState:
    """Leave review (selection kept) or impact (selection cleared)."""
    update: dict = {"page": PageEnum.DASHBOARD}
    if clear_selection:
        update["selected_ids"] = frozenset()
    return state.model_copy(update=update)
