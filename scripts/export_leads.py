#!/usr/bin/env python3
"""
Lead Export Script

Exports marketing leads or pipeline clients to CSV, with the same columns and
filters as the dashboard's export buttons.

Usage:
    python export_leads.py --output leads_export.csv
    python export_leads.py --interest hot --output hot_leads.csv
    python export_leads.py --pipeline --stage quoted --output quoted.csv
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from config.settings import Settings
from domain.filters import (
    ActivityFilter,
    LeadFilter,
    PipelineFilter,
    filter_marketing_leads,
    filter_pipeline_clients,
)
from domain.marketing_lead import InterestLevel, MarketingLeadStatus
from domain.pipeline import PipelineStage, Priority
from domain.source import LeadSource
from domain.time import utc_now
from repositories import create_store
from services.csv_export_service import (
    LEADS_EXPORT_HEADER,
    PIPELINE_EXPORT_HEADER,
    export_filename,
    export_marketing_leads_csv,
    export_pipeline_csv,
)
from services.marketing_lead_service import MarketingLeadService
from services.pipeline_service import PipelineService


def _values(enum_cls) -> list[str]:
    return [member.value for member in enum_cls]


def write_csv(content: str, output_path: str) -> None:
    with open(output_path, "w", newline="", encoding="utf-8") as f:
        f.write(content)


def main() -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Export marketing leads or pipeline clients to CSV",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Export all marketing leads (default file name leads-export-YYYY-MM-DD.csv)
  python export_leads.py

  # Export hot leads idle for over two weeks
  python export_leads.py --interest hot --activity stale --output stale_hot.csv

  # Export quoted pipeline clients
  python export_leads.py --pipeline --stage quoted --output quoted.csv
        """
    )

    parser.add_argument(
        "--output",
        "-o",
        help="Path to output CSV file (default: dated export name)"
    )

    parser.add_argument(
        "--pipeline",
        action="store_true",
        help="Export pipeline clients instead of marketing leads"
    )

    parser.add_argument("--search", help="Case-insensitive match on name or e-mail")
    parser.add_argument("--source", choices=_values(LeadSource), help="Leads: filter by source")
    parser.add_argument("--status", choices=_values(MarketingLeadStatus), help="Leads: filter by status")
    parser.add_argument("--interest", choices=_values(InterestLevel), help="Leads: filter by interest")
    parser.add_argument("--activity", choices=_values(ActivityFilter), help="Leads: active or stale")
    parser.add_argument("--stage", choices=_values(PipelineStage), help="Pipeline: filter by stage")
    parser.add_argument("--priority", choices=_values(Priority), help="Pipeline: filter by priority")

    args = parser.parse_args()

    try:
        store = create_store(Settings.from_env())
        now = utc_now()

        if args.pipeline:
            print("Fetching pipeline clients...")
            criteria = PipelineFilter(
                search=args.search,
                stage=PipelineStage(args.stage) if args.stage else None,
                priority=Priority(args.priority) if args.priority else None,
            )
            rows = filter_pipeline_clients(PipelineService(store).fetch_pipeline_clients(), criteria)
            content = export_pipeline_csv(rows)
            columns = PIPELINE_EXPORT_HEADER
            output = args.output or export_filename(now.date(), prefix="pipeline-export")
        else:
            print("Fetching marketing leads...")
            criteria = LeadFilter(
                search=args.search,
                source=LeadSource(args.source) if args.source else None,
                status=MarketingLeadStatus(args.status) if args.status else None,
                interest=InterestLevel(args.interest) if args.interest else None,
                activity=ActivityFilter(args.activity) if args.activity else None,
            )
            rows = filter_marketing_leads(MarketingLeadService(store).fetch_marketing_leads(now), criteria, now)
            content = export_marketing_leads_csv(rows)
            columns = LEADS_EXPORT_HEADER
            output = args.output or export_filename(now.date())

        if not rows:
            print("No records found matching the specified filters")
            return 1

        print(f"Exporting {len(rows)} records to {output}")
        print(f"CSV will contain {len(columns)} columns")
        write_csv(content, output)

        print()
        print("=" * 60)
        print("EXPORT SUMMARY")
        print("=" * 60)
        print(f"Total records exported: {len(rows)}")
        print(f"Output file: {output}")
        print("=" * 60)

        return 0

    except KeyboardInterrupt:
        print("\n\nExport interrupted by user")
        return 130

    except Exception as e:
        print(f"\nERROR: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
