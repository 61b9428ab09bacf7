#!/usr/bin/env python3
"""
Initialize the database, optionally with sample history
"""

import argparse
import os
import random
import sys
from datetime import timedelta

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from home_monitor.core.config import settings
from home_monitor.core.logging_config import configure_logging
from home_monitor.core.timeutil import utcnow
from home_monitor.database.store import MonitorStore
from home_monitor.schemas.device import DeviceReport, NO_ERROR_CODE

def sample_reports(hours: int = 24, every_minutes: int = 5):
    """Plausible report history ending now, oldest first"""
    now = utcnow()
    steps = hours * 60 // every_minutes
    co2 = 600.0

    for i in range(steps, 0, -1):
        timestamp = now - timedelta(minutes=i * every_minutes)
        co2 = min(2000.0, max(400.0, co2 + random.uniform(-40, 40)))
        yield timestamp, DeviceReport(
            error_code=NO_ERROR_CODE,
            co2_level=round(co2, 1),
            sound_level=round(random.uniform(30, 70), 1),
            temperature=round(random.uniform(19, 24), 1),
            alarm_active=False,
            alarm_active_time=0
        )

def main(argv=None):
    parser = argparse.ArgumentParser(description="Create tables and seed sample data")
    parser.add_argument("--seed", action="store_true", help="insert sample sensor history")
    parser.add_argument("--hours", type=int, default=settings.sensor_window_hours,
                        help="hours of history to generate")
    parser.add_argument("--alarm", default="07:30", help="initial alarm time (HH:mm)")
    args = parser.parse_args(argv)

    configure_logging(settings.log_level)
    store = MonitorStore.from_settings(settings)
    store.check_connection()
    store.create_schema()
    print("✅ Tables created")

    if args.seed:
        count = store.backfill_reports(sample_reports(hours=args.hours))
        print(f"✅ {count} sample reports created")
        if store.current_alarm() is None:
            store.add_alarm_time(args.alarm)
            print(f"✅ Alarm set to {args.alarm}")

    print("\n🎉 Database initialization complete!")

if __name__ == "__main__":
    main()
