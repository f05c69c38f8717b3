"""
Marketing lead service: prospects that have not submitted a selection.

Rules implemented here:
- Any profile with a submission belongs to the pipeline and is excluded.
- Status is browsing when the profile's selection has at least one item,
  otherwise registered.
- last_activity_at is the selection's updated_at, else the profile's updated_at.
- The newest outreach entry per profile supplies last_outreach_at and
  next_follow_up.
- Active, unconverted newsletter subscribers are appended as newsletter_only
  leads (interest warm, tag "newsletter").
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Dict, List, Optional, Sequence

from domain.marketing_lead import (
    InterestLevel,
    MarketingLead,
    MarketingLeadStatus,
    OutreachOutcome,
    OutreachRecord,
    OutreachType,
)
from domain.normalization import normalize_interest, normalize_source
from domain.payments import ZERO, selection_count, selection_value
from domain.pipeline import display_name
from domain.time import parse_date, parse_utc_datetime, require_utc_timestamp, utc_now
from repositories.rows import (
    NewsletterRow,
    OutreachRow,
    ProfileRow,
    SelectionRow,
    SubmissionRow,
)
from repositories.store import OperationsStore
from services.reads import read_or_empty
from services.selection import parse_selection_items

logger = logging.getLogger(__name__)

NEWSLETTER_TAG = "newsletter"


def assemble_marketing_leads(
    profiles: Sequence[ProfileRow],
    submissions: Sequence[SubmissionRow],
    selections: Sequence[SelectionRow],
    newsletter: Sequence[NewsletterRow],
    outreach: Sequence[OutreachRow],
    now: datetime,
) -> List[MarketingLead]:
    """
    Profiles without a submission, followed by newsletter-only subscribers.

    `now` stands in for any missing creation or subscription timestamp.
    """

    require_utc_timestamp("now", now)

    submitted = {row.get("user_id") for row in submissions}
    selections_by_user: Dict[str, SelectionRow] = {row["user_id"]: row for row in selections}

    # Outreach arrives newest first; keep the first entry per profile.
    latest_outreach: Dict[str, OutreachRow] = {}
    for row in outreach:
        latest_outreach.setdefault(row.get("client_id", ""), row)

    leads: List[MarketingLead] = []

    for profile in profiles:
        if profile["id"] in submitted:
            continue

        selection = selections_by_user.get(profile["id"])
        items = parse_selection_items(selection.get("items") if selection else None)
        outreach_row = latest_outreach.get(profile["id"])
        created_at = parse_utc_datetime(profile.get("created_at")) or now
        last_activity = (
            parse_utc_datetime(selection.get("updated_at")) if selection else None
        ) or parse_utc_datetime(profile.get("updated_at")) or created_at

        leads.append(
            MarketingLead(
                id=profile["id"],
                name=display_name(profile.get("first_name"), profile.get("last_name"), profile.get("email", "")),
                email=profile.get("email", ""),
                phone=profile.get("phone"),
                source=normalize_source(profile.get("lead_source")),
                status=MarketingLeadStatus.BROWSING if items else MarketingLeadStatus.REGISTERED,
                interest=normalize_interest(profile.get("interest_level")),
                selection_count=selection_count(items),
                selection_value=selection_value(items),
                created_at=created_at,
                last_activity_at=last_activity,
                last_outreach_at=parse_utc_datetime(outreach_row.get("created_at")) if outreach_row else None,
                next_follow_up=parse_date(outreach_row.get("follow_up_date")) if outreach_row else None,
                account_number=profile.get("account_number"),
                account_type=profile.get("account_type"),
            )
        )

    for subscriber in newsletter:
        subscribed_at = parse_utc_datetime(subscriber.get("subscribed_at")) or now
        email = subscriber.get("email", "")
        leads.append(
            MarketingLead(
                id=subscriber["id"],
                name=email.split("@")[0],
                email=email,
                source=normalize_source(subscriber.get("source")),
                status=MarketingLeadStatus.NEWSLETTER_ONLY,
                interest=InterestLevel.WARM,
                selection_count=0,
                selection_value=ZERO,
                created_at=subscribed_at,
                last_activity_at=subscribed_at,
                tags=(NEWSLETTER_TAG,),
                is_newsletter_only=True,
                converted_to_account=False,
            )
        )

    return leads


class MarketingLeadService:
    """Reads and writes for marketing leads over an OperationsStore."""

    def __init__(self, store: OperationsStore) -> None:
        self._store = store

    def fetch_marketing_leads(self, now: Optional[datetime] = None) -> List[MarketingLead]:
        profiles = read_or_empty("profiles", self._store.list_profiles)
        if not profiles:
            return []

        # Without the submission list the pipeline exclusion cannot be
        # guaranteed, so nothing from profiles is returned.
        try:
            submissions = self._store.list_submissions()
        except RuntimeError as e:
            logger.error(
                f"Error fetching submissions: {e}",
                extra={"read": "submissions", "error": str(e)},
            )
            return []

        return assemble_marketing_leads(
            profiles,
            submissions,
            read_or_empty("selections", self._store.list_selections),
            read_or_empty("newsletter subscribers", self._store.list_newsletter_leads),
            read_or_empty("outreach", self._store.list_outreach),
            now or utc_now(),
        )

    def update_interest(self, lead_id: str, interest: InterestLevel) -> bool:
        try:
            updated = self._store.update_profile_interest(lead_id, interest.value)
        except RuntimeError as e:
            logger.error(
                f"Error updating lead interest: {e}",
                extra={"lead_id": lead_id, "interest": interest.value},
            )
            return False
        return bool(updated)

    def log_outreach(
        self,
        lead_id: str,
        outreach_type: OutreachType,
        outcome: OutreachOutcome,
        notes: Optional[str] = None,
        follow_up_date: Optional[date] = None,
    ) -> bool:
        record = OutreachRecord(
            lead_id=lead_id,
            type=outreach_type,
            outcome=outcome,
            notes=notes,
            follow_up_date=follow_up_date,
        )
        follow_up = record.follow_up_date
        try:
            self._store.insert_outreach(
                {
                    "client_id": record.lead_id,
                    "outreach_type": record.type.value,
                    "outcome": record.outcome.value,
                    "notes": record.notes,
                    "follow_up_date": follow_up.isoformat() if follow_up else None,
                }
            )
        except RuntimeError as e:
            logger.error(
                f"Error logging outreach: {e}",
                extra={"lead_id": record.lead_id, "outreach_type": record.type.value},
            )
            return False

        logger.info(
            f"Logged {record.type.value} outreach for lead {record.lead_id}",
            extra={"lead_id": record.lead_id, "outcome": record.outcome.value},
        )
        return True


__all__ = ["MarketingLeadService", "NEWSLETTER_TAG", "assemble_marketing_leads"]
