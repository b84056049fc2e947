"""Import worked hours from Primeponto for a day or a period.

Usage:
    python scripts/import_time_clock.py --start 2024-01-08 --end 2024-01-10
"""

from __future__ import annotations

import argparse
import logging
import signal
import sys
import threading
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.timeclock_integration.timeclock_integration.container import build_container
from src.timeclock_integration.timeclock_integration.core.exceptions import ConfigurationError, ValidationError
from src.timeclock_integration.timeclock_integration.main import configure_logging, load_settings
from src.timeclock_integration.timeclock_integration.timeclock.model import DateRange

logger = logging.getLogger("import_time_clock")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--start", required=True, help="First day, YYYY-MM-DD")
    parser.add_argument("--end", help="Last day, YYYY-MM-DD (defaults to --start)")
    parser.add_argument("--workers", type=int, default=None, help="Employees fetched in parallel")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    settings = load_settings()
    configure_logging(settings)

    container = build_container(db_config=dict(settings.DB_CONFIG), settings=settings)

    cancel = threading.Event()
    signal.signal(signal.SIGINT, lambda *_: cancel.set())

    try:
        date_range = DateRange.parse(args.start, args.end)
        report = container.import_time_clock(date_range, max_workers=args.workers, cancel_event=cancel)
    except (ValidationError, ConfigurationError) as e:
        logger.error("%s", e)
        return 2

    for r in report.skipped:
        logger.warning("user_id=%s %s %s", r.user_id, r.status.value, r.error or "")
    print(f"Imported {len(report.imported)} employees, skipped {len(report.skipped)}")
    return 0 if report else 1


if __name__ == "__main__":
    sys.exit(main())
