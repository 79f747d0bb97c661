"""Example: build and export a period report through the service layer (no Flask).

Usage: python examples/example_usage.py <colony_id> <period_number> [--weekdays]
"""

import importlib
import sys

from config import get_settings_module

from src.colony_attendance.colony_attendance.container import build_container


def main(argv):
    if len(argv) < 2:
        print(__doc__)
        return 2

    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    report = container.report_service.build_report(argv[0], int(argv[1]), weekdays_only="--weekdays" in argv)
    sys.stdout.write(container.report_service.export_report_as_text(report))
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
