#!/usr/bin/env python3
"""
Run the device simulator against a running backend
"""

import argparse
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from home_monitor.collectors.device_simulator import DeviceSimulator
from home_monitor.core.config import settings
from home_monitor.core.logging_config import configure_logging

def main(argv=None):
    parser = argparse.ArgumentParser(description="Simulate the monitoring device")
    parser.add_argument("--url", default=settings.simulator_api_url, help="backend base URL")
    parser.add_argument("--interval", type=int, default=settings.simulator_interval_seconds,
                        help="seconds between reports")
    parser.add_argument("--count", type=int, default=None, help="stop after this many reports")
    args = parser.parse_args(argv)

    configure_logging(settings.log_level)
    simulator = DeviceSimulator(args.url, interval=args.interval)
    try:
        simulator.run(max_reports=args.count)
    except KeyboardInterrupt:
        simulator.stop()

if __name__ == "__main__":
    main()
