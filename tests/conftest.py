"""
Pytest configuration.

Adds the project root to the Python path so tests can import domain,
repositories, services and api, and provides shared fixtures built on the
in-memory development dataset.
"""

import sys
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path
from typing import Optional

import pytest

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from domain.pipeline import PipelineClient, PipelineStage, Priority  # noqa: E402
from domain.source import LeadSource  # noqa: E402
from repositories.fixture_store import FixtureStore  # noqa: E402

# The development dataset is anchored on this instant.
NOW = datetime(2024, 12, 23, 10, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def fixture_store() -> FixtureStore:
    return FixtureStore()


def make_client(
    client_id: str,
    stage: PipelineStage = PipelineStage.SUBMITTED,
    selection_value: str = "1000",
    quote_value: Optional[str] = None,
    **overrides,
) -> PipelineClient:
    fields = dict(
        id=client_id,
        profile_id=f"p-{client_id}",
        name=f"Client {client_id}",
        email=f"{client_id}@example.com",
        stage=stage,
        priority=Priority.NORMAL,
        source=LeadSource.WEBSITE_SIGNUP,
        selection_count=1,
        selection_value=Decimal(selection_value),
        submitted_at=NOW,
        quote_value=Decimal(quote_value) if quote_value is not None else None,
    )
    fields.update(overrides)
    return PipelineClient(**fields)
