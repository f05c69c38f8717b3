"""
CSV export service for the leads and pipeline lists.

Generates CSV text for an already-filtered list of marketing leads or pipeline
clients. Enum columns carry their display labels; money columns are plain
decimal strings.

Security:
- CSV Injection Prevention: free-text fields (name, e-mail, phone, assignee)
  are sanitized to prevent formula execution; an international phone number
  keeps its leading "+"
- Security Logging: Logs when dangerous characters are stripped
- Quoting: the csv module quotes fields containing commas, quotes or newlines
"""

from __future__ import annotations

import csv
import logging
import re
from datetime import date, datetime
from decimal import Decimal
from io import StringIO
from typing import Iterable, List, Optional

from domain.marketing_lead import MarketingLead
from domain.pipeline import PipelineClient

logger = logging.getLogger(__name__)

_INTERNATIONAL_PHONE = re.compile(r"^\+[\d\s()-]+$")

LEADS_EXPORT_HEADER: List[str] = [
    "Name",
    "Email",
    "Phone",
    "Source",
    "Status",
    "Interest",
    "Selection Value",
    "Last Activity",
]

PIPELINE_EXPORT_HEADER: List[str] = [
    "Name",
    "Email",
    "Phone",
    "Stage",
    "Priority",
    "Source",
    "Selection Value",
    "Quote Value",
    "Total Paid",
    "Total Due",
    "Assigned To",
    "Submitted At",
]


def sanitize_csv_field(value: str | None, field_name: str = "unknown") -> str:
    """
    Sanitize field to prevent CSV injection attacks with security logging.

    Strips leading characters that can trigger formula execution in Excel/Sheets:
    =, +, -, @, tab, carriage return

    If dangerous characters are found and stripped, a warning is logged for
    security monitoring.

    Example:
        sanitize_csv_field("=HYPERLINK(...)", "name")
        # Returns "HYPERLINK(...)" and logs warning about stripped "=" character

        sanitize_csv_field("@SUM(A1)", "email")
        # Returns "SUM(A1)" and logs warning about stripped "@" character
    """
    if value is None or value == "":
        return ""

    text = str(value).strip()
    original_text = text
    dangerous_chars = {'=', '+', '-', '@', '\t', '\r'}

    stripped_chars = []
    while text and text[0] in dangerous_chars:
        stripped_chars.append(text[0])
        text = text[1:]

    if stripped_chars:
        logger.warning(
            f"CSV injection character(s) stripped from field '{field_name}'",
            extra={
                "field_name": field_name,
                "stripped_characters": "".join(stripped_chars),
                "original_value": original_text[:100],
                "sanitized_value": text[:100],
                "modification_type": "csv_injection_prevention"
            }
        )

    return text


def sanitize_csv_phone(value: str | None) -> str:
    """
    Sanitize a phone number field.

    A well-formed international number ("+44 20 7123 4567") is written as-is;
    its leading "+" is part of the number. Anything else goes through
    sanitize_csv_field.
    """
    if value is not None and _INTERNATIONAL_PHONE.match(value.strip()):
        return value.strip()
    return sanitize_csv_field(value, "phone")


def _money(value: Optional[Decimal]) -> str:
    return "" if value is None else str(value)


def _timestamp(value: Optional[datetime]) -> str:
    return "" if value is None else value.isoformat()


def export_filename(today: date, prefix: str = "leads-export") -> str:
    """Download name, e.g. leads-export-2024-12-23.csv."""

    return f"{prefix}-{today.isoformat()}.csv"


def export_marketing_leads_csv(leads: Iterable[MarketingLead]) -> str:
    output = StringIO()
    writer = csv.writer(output)
    writer.writerow(LEADS_EXPORT_HEADER)

    for lead in leads:
        writer.writerow([
            sanitize_csv_field(lead.name, "name"),
            sanitize_csv_field(lead.email, "email"),
            sanitize_csv_phone(lead.phone),
            lead.source.label,
            lead.status.label,
            lead.interest.label,
            _money(lead.selection_value),
            _timestamp(lead.last_activity_at),
        ])

    return output.getvalue()


def export_pipeline_csv(clients: Iterable[PipelineClient]) -> str:
    output = StringIO()
    writer = csv.writer(output)
    writer.writerow(PIPELINE_EXPORT_HEADER)

    for client in clients:
        writer.writerow([
            sanitize_csv_field(client.name, "name"),
            sanitize_csv_field(client.email, "email"),
            sanitize_csv_phone(client.phone),
            client.stage.label,
            client.priority.value.capitalize(),
            client.source.label,
            _money(client.selection_value),
            _money(client.quote_value),
            _money(client.total_paid),
            _money(client.total_due),
            sanitize_csv_field(client.assigned_to_name, "assigned_to"),
            _timestamp(client.submitted_at),
        ])

    return output.getvalue()


__all__ = [
    "LEADS_EXPORT_HEADER",
    "PIPELINE_EXPORT_HEADER",
    "export_filename",
    "export_marketing_leads_csv",
    "export_pipeline_csv",
    "sanitize_csv_field",
    "sanitize_csv_phone",
]
