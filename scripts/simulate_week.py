"""What would the tracker tell you about a typical week?

Logs a week of sample sleep sessions (short weeknights, long weekend
lie-ins) and prints the analysis, the insights and the weekly report.

Usage:
    python scripts/simulate_week.py
"""

import datetime
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.schemas.sleep_entry import SleepEntryCreate
from app.sleep.tracker import SleepTracker

WEEK_START = datetime.date(2026, 2, 2)

# ─── (day offset, fell asleep, woke up) ──────────────────────────────
RAW_DATA = [
    (0, "23:45", "06:30"),
    (1, "00:30", "06:30"),
    (2, "11:15 PM", "6:45 AM"),
    (3, "01:00", "06:30"),
    (4, "00:15", "07:00"),
    (5, "01:30", "10:45"),
    (6, "23:30", "09:15"),
]


def main():
    tracker = SleepTracker()
    for offset, start, end in RAW_DATA:
        tracker.log_sleep(SleepEntryCreate(
            date=WEEK_START + datetime.timedelta(days=offset),
            start_time=start,
            end_time=end,
        ))

    print()
    print("=" * 65)
    print(f"  Sleep week — {WEEK_START.strftime('%A %d %B %Y')}")
    print("=" * 65)
    print()

    print(f"  {'Date':<12} {'Start':>9} {'End':>9} {'Hours':>7} {'Weekend':>8}")
    print("  " + "-" * 63)
    for entry in tracker.get_sleep_entries():
        print(
            f"  {entry.date.isoformat():<12} {entry.start_time:>9} {entry.end_time:>9} "
            f"{entry.duration:>7.2f} {'yes' if entry.is_weekend else '':>8}"
        )
    print()

    analysis = tracker.get_sleep_analysis()
    m = analysis.metrics
    print(f"  Weekday consistency: {m.weekday_consistency:.0f}%")
    print(f"  Weekend recovery:    {m.weekend_recovery:.2f} h")
    print(f"  Sleep debt:          {m.sleep_debt:.2f} h")
    print(f"  Variability:         {m.sleep_variability:.2f} h")
    print(f"  Catch-up suggested:  {analysis.optimal_catchup_hours:.2f} h")
    print(f"  Quality score:       {analysis.consistency_score:.0f}")
    print()

    insight = tracker.get_health_insights()
    print("  " + "-" * 63)
    print(f"  RISK LEVEL: {insight.risk_level.upper()}")
    print("  " + "-" * 63)
    for rec in insight.recommendations:
        print(f"  [{rec.priority:<6}] {rec.category:<15} {rec.description}")
    print()
    if insight.improvement_areas:
        print(f"  Improve: {', '.join(insight.improvement_areas)}")
    if insight.success_factors:
        print(f"  Keep:    {', '.join(insight.success_factors)}")
    print()

    report = tracker.generate_weekly_report(WEEK_START)
    print("  " + "-" * 63)
    print(f"  {report.summary}")
    for trend in report.trends:
        print(f"    - {trend}")
    print()


if __name__ == "__main__":
    main()
