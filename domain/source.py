"""
Domain: Lead source channels.

Tracks where a prospect originally came from. Shared by marketing leads and
pipeline clients.
"""

from __future__ import annotations

from enum import Enum
from typing import Mapping


class LeadSource(str, Enum):
    WEBSITE_SIGNUP = "website_signup"
    WEBSITE_NEWSLETTER = "website_newsletter"
    COMING_SOON = "coming_soon"
    REFERRAL = "referral"
    SOCIAL = "social"
    PHONE = "phone"
    WALK_IN = "walk_in"
    OTHER = "other"

    @property
    def label(self) -> str:
        return _SOURCE_LABELS[self]


_SOURCE_LABELS: Mapping[LeadSource, str] = {
    LeadSource.WEBSITE_SIGNUP: "Website",
    LeadSource.WEBSITE_NEWSLETTER: "Newsletter",
    LeadSource.COMING_SOON: "Coming Soon",
    LeadSource.REFERRAL: "Referral",
    LeadSource.SOCIAL: "Social",
    LeadSource.PHONE: "Phone",
    LeadSource.WALK_IN: "Walk-in",
    LeadSource.OTHER: "Other",
}
