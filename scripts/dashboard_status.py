"""
Check dashboard status - the summary cards as a role would see them.

Usage:
    python dashboard_status.py --role operations
"""

import argparse
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from config.settings import Settings
from domain.permissions import AdminRole, visible_sections
from domain.time import utc_now
from repositories import create_store
from services.dashboard_service import DashboardService


def print_summary(role: AdminRole, settings: Settings) -> None:
    store = create_store(settings)
    summary = DashboardService(store, settings.follow_up_after_days).summary(role, utc_now())

    print("=" * 50)
    print(f"DASHBOARD ({role.display_name})")
    print("=" * 50)
    print(f"Sections: {', '.join(visible_sections(role))}")

    if summary.pipeline is not None:
        print(f"Pipeline clients (new):    {summary.pipeline.new_submissions}")
        print(f"Active deals:              {summary.pipeline.active_deals}")
        print(f"Pipeline value:            {summary.pipeline.total_pipeline_value}")
    if summary.leads is not None:
        print(f"Marketing leads:           {summary.leads.total} ({summary.leads.hot} hot)")
        print(f"Needing follow-up:         {summary.leads.needs_follow_up}")
    if summary.quotes is not None:
        print(f"Quotes awaiting response:  {summary.quotes.awaiting_response}")
        print(f"Win rate:                  {summary.quotes.win_rate}%")
    if summary.orders is not None:
        print(f"Orders in progress:        {summary.orders.in_progress}")
    if summary.deliveries is not None:
        print(f"Deliveries today:          {summary.deliveries.today}")

    print(f"Tasks pending / overdue:   {summary.tasks.pending} / {summary.tasks.overdue}")
    print(f"Unread notifications:      {summary.unread_notifications}")
    print("=" * 50)


def main() -> int:
    parser = argparse.ArgumentParser(description="Print the dashboard summary for a role")
    parser.add_argument(
        "--role",
        choices=[role.value for role in AdminRole],
        default=AdminRole.ADMIN.value,
        help="Role to view the dashboard as"
    )
    args = parser.parse_args()

    print_summary(AdminRole(args.role), Settings.from_env())
    return 0


if __name__ == "__main__":
    sys.exit(main())
