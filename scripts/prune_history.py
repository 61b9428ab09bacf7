#!/usr/bin/env python3
"""
Delete device status and sensor history older than the retention period
"""

import argparse
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from home_monitor.core.config import settings
from home_monitor.core.logging_config import configure_logging
from home_monitor.database.store import MonitorStore

def main(argv=None):
    parser = argparse.ArgumentParser(description="Prune old device history")
    parser.add_argument("--days", type=int, default=settings.metrics_retention_days,
                        help="keep this many days of history")
    args = parser.parse_args(argv)

    if args.days < 1:
        parser.error("--days must be at least 1")

    configure_logging(settings.log_level)
    store = MonitorStore.from_settings(settings)
    deleted = store.prune_history(args.days)
    print(f"Deleted {deleted['device_status']} status rows and {deleted['sensor_data']} sensor rows")
    return deleted

if __name__ == "__main__":
    main()
