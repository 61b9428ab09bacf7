import unittest
import sys
import os
from datetime import datetime, timedelta

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from home_monitor.models import AlarmTime, DeviceStatus, SensorData
from home_monitor.schemas.device import DeviceReport
from tests.support import make_store

NOW = datetime(2026, 10, 19, 12, 0, 0)

class TestMonitorStore(unittest.TestCase):
    """Test cases for the store outside of the HTTP layer"""

    def setUp(self):
        self.store = make_store()

    def test_empty_store_reads(self):
        self.assertIsNone(self.store.latest_device_status())
        self.assertIsNone(self.store.current_alarm())
        self.assertEqual(self.store.sensor_history(now=NOW), [])

    def test_record_report_shares_timestamp(self):
        status = self.store.record_device_report(DeviceReport(co2_level=700.0, temperature=22.0))
        reading = self.store.sensor_history()[0]

        self.assertIsNotNone(status.id)
        self.assertEqual(status.last_seen, reading.timestamp)
        self.assertEqual(reading.temperature, 22.0)

    def test_latest_status_is_newest_by_timestamp(self):
        self.store.backfill_reports([
            (NOW - timedelta(minutes=1), DeviceReport(co2_level=900.0)),
            (NOW - timedelta(minutes=5), DeviceReport(co2_level=400.0)),
        ])
        self.assertEqual(self.store.latest_device_status().co2_level, 900.0)

    def test_set_armed_without_alarm_returns_none(self):
        self.assertIsNone(self.store.set_alarm_armed(False))
        self.assertEqual(self.store.count_rows(AlarmTime), 0)

    def test_prune_removes_old_history(self):
        self.store.backfill_reports([
            (NOW - timedelta(days=100), DeviceReport(co2_level=1.0)),
            (NOW - timedelta(days=95), DeviceReport(co2_level=2.0)),
            (NOW - timedelta(days=10), DeviceReport(co2_level=3.0)),
        ])
        self.store.add_alarm_time("07:30")

        deleted = self.store.prune_history(90, now=NOW)

        self.assertEqual(deleted, {"device_status": 2, "sensor_data": 2})
        self.assertEqual(self.store.count_rows(DeviceStatus), 1)
        self.assertEqual(self.store.count_rows(SensorData), 1)
        self.assertEqual(self.store.count_rows(AlarmTime), 1)

    def test_prune_keeps_current_status(self):
        self.store.backfill_reports([
            (NOW - timedelta(days=200), DeviceReport(co2_level=1.0)),
            (NOW - timedelta(days=150), DeviceReport(co2_level=2.0)),
        ])

        deleted = self.store.prune_history(90, now=NOW)

        self.assertEqual(deleted["device_status"], 1)
        self.assertEqual(deleted["sensor_data"], 2)
        self.assertEqual(self.store.latest_device_status().co2_level, 2.0)

    def test_prune_on_empty_store(self):
        self.assertEqual(self.store.prune_history(90, now=NOW), {"device_status": 0, "sensor_data": 0})

if __name__ == '__main__':
    unittest.main()
