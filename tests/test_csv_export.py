"""
Tests for `services/csv_export_service.py`.

Covers contract rules:
- Fixed header per export type.
- Free-text fields containing commas, quotes or newlines survive a round trip.
- Leading formula characters are stripped from free-text fields only.
- International phone numbers keep their leading "+".
"""

from __future__ import annotations

import csv
import logging
from datetime import date, timedelta
from decimal import Decimal
from io import StringIO

from conftest import NOW, make_client
from domain.marketing_lead import InterestLevel, MarketingLead, MarketingLeadStatus
from domain.pipeline import PipelineStage, Priority
from domain.source import LeadSource
from repositories.fixture_store import FixtureStore
from services.csv_export_service import (
    LEADS_EXPORT_HEADER,
    PIPELINE_EXPORT_HEADER,
    export_filename,
    export_marketing_leads_csv,
    export_pipeline_csv,
    sanitize_csv_field,
    sanitize_csv_phone,
)
from services.marketing_lead_service import MarketingLeadService


def _rows(text: str):
    return list(csv.reader(StringIO(text)))


def _lead(name: str, phone=None) -> MarketingLead:
    return MarketingLead(
        id="p-1",
        name=name,
        email="lead@example.com",
        phone=phone,
        source=LeadSource.WALK_IN,
        status=MarketingLeadStatus.BROWSING,
        interest=InterestLevel.HOT,
        selection_count=2,
        selection_value=Decimal("1250.50"),
        created_at=NOW - timedelta(days=30),
        last_activity_at=NOW,
    )


def test_leads_header() -> None:
    assert _rows(export_marketing_leads_csv([]))[0] == [
        "Name",
        "Email",
        "Phone",
        "Source",
        "Status",
        "Interest",
        "Selection Value",
        "Last Activity",
    ]
    assert LEADS_EXPORT_HEADER[0] == "Name"


def test_lead_row_uses_labels() -> None:
    rows = _rows(export_marketing_leads_csv([_lead("Jennifer Clark", "07900 234567")]))

    assert rows[1] == [
        "Jennifer Clark",
        "lead@example.com",
        "07900 234567",
        "Walk-in",
        "Browsing",
        "Hot",
        "1250.50",
        NOW.isoformat(),
    ]


def test_embedded_commas_quotes_and_newlines_round_trip() -> None:
    name = 'Smith, "The Elder"\nJr'

    rows = _rows(export_marketing_leads_csv([_lead(name)]))

    assert len(rows) == 2
    assert rows[1][0] == name


def test_formula_prefix_is_stripped_from_text_fields(caplog) -> None:
    with caplog.at_level(logging.WARNING):
        rows = _rows(export_marketing_leads_csv([_lead("=HYPERLINK(\"x\")", "=cmd|calc")]))

    assert rows[1][0] == 'HYPERLINK("x")'
    assert rows[1][2] == "cmd|calc"
    assert "CSV injection character(s) stripped" in caplog.text


def test_international_phone_keeps_plus_sign() -> None:
    lead_rows = _rows(export_marketing_leads_csv([_lead("Jennifer Clark", "+44 20 7123 4567")]))
    pipeline_rows = _rows(export_pipeline_csv([make_client("a", phone="+44 (0)20 7123-4567")]))

    assert lead_rows[1][2] == "+44 20 7123 4567"
    assert pipeline_rows[1][2] == "+44 (0)20 7123-4567"


def test_sanitize_csv_phone() -> None:
    assert sanitize_csv_phone(None) == ""
    assert sanitize_csv_phone(" +1 555 0100 ") == "+1 555 0100"
    assert sanitize_csv_phone("+SUM(A1)") == "SUM(A1)"
    assert sanitize_csv_phone("=1+1") == "1+1"
    assert sanitize_csv_phone("07900 234567") == "07900 234567"


def test_sanitize_csv_field() -> None:
    assert sanitize_csv_field(None) == ""
    assert sanitize_csv_field("") == ""
    assert sanitize_csv_field("  @SUM(A1)  ") == "SUM(A1)"
    assert sanitize_csv_field("-+=cmd") == "cmd"
    assert sanitize_csv_field("Plain text") == "Plain text"


def test_pipeline_export_keeps_negative_amounts() -> None:
    client = make_client(
        "a",
        PipelineStage.READY_DELIVERY,
        selection_value="1000",
        quote_value="900",
        priority=Priority.URGENT,
        deposit_paid=Decimal("1000"),
        assigned_to_name="Sarah Johnson",
    )

    rows = _rows(export_pipeline_csv([client]))

    assert rows[0] == PIPELINE_EXPORT_HEADER
    assert rows[1][3:11] == ["Ready for Delivery", "Urgent", "Website", "1000", "900", "1000", "-100", "Sarah Johnson"]


def test_pipeline_export_blank_quote_value() -> None:
    rows = _rows(export_pipeline_csv([make_client("a")]))

    assert rows[1][7] == ""
    assert rows[1][10] == ""


def test_export_of_development_leads(fixture_store: FixtureStore) -> None:
    rows = _rows(export_marketing_leads_csv(MarketingLeadService(fixture_store).fetch_marketing_leads()))

    assert len(rows) == 5
    assert rows[4][:3] == ["hello", "hello@greenhome.co.uk", ""]
    assert rows[4][4] == "Newsletter Only"


def test_export_filename() -> None:
    assert export_filename(date(2024, 12, 23)) == "leads-export-2024-12-23.csv"
    assert export_filename(date(2024, 12, 23), prefix="pipeline-export") == "pipeline-export-2024-12-23.csv"
