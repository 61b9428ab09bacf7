"""
Device simulator for local development
Plays the role of the monitoring device: posts periodic reports to the
backend and follows the alarm configuration it receives back
"""

import random
import time
from datetime import datetime
from typing import Dict, Optional

import requests
import structlog

from home_monitor.schemas.device import NO_ERROR_CODE

logger = structlog.get_logger(__name__)

ALARM_DURATION_SECONDS = 60

class DeviceSimulator:
    """Posts simulated device reports on a fixed interval"""

    def __init__(self, api_url: str, interval: int = 10, session: Optional[requests.Session] = None):
        self.api_url = api_url.rstrip("/")
        self.interval = interval
        self.session = session or requests.Session()
        self.running = False
        self.alarm_time = ""
        self.armed = False
        self.clock_offset = 0.0
        self.alarm_started_at: Optional[datetime] = None

    def device_now(self) -> datetime:
        """Local wall clock corrected by the server time"""
        return datetime.fromtimestamp(time.time() + self.clock_offset)

    def build_report(self, now: datetime) -> Dict:
        """Build one report as the firmware would send it"""
        alarm_active = self._update_alarm(now)
        active_time = int((now - self.alarm_started_at).total_seconds()) if alarm_active else 0

        return {
            "error_code": NO_ERROR_CODE,
            "co2_level": round(random.uniform(400, 1200), 1),
            "sound_level": round(random.uniform(30, 70), 1),
            "alarm_active": alarm_active,
            "alarm_active_time": active_time
        }

    def _update_alarm(self, now: datetime) -> bool:
        if self.alarm_started_at is not None:
            elapsed = (now - self.alarm_started_at).total_seconds()
            if not self.armed or elapsed >= ALARM_DURATION_SECONDS:
                logger.info("Alarm stopped", elapsed=elapsed, armed=self.armed)
                self.alarm_started_at = None
            return self.alarm_started_at is not None

        if self.armed and self.alarm_time == now.strftime("%H:%M"):
            logger.info("Alarm triggered", alarm_time=self.alarm_time)
            self.alarm_started_at = now
            return True
        return False

    def send_report(self) -> Dict:
        """Post one report and apply the alarm configuration from the response"""
        report = self.build_report(self.device_now())
        response = self.session.post(f"{self.api_url}/api/device/update", json=report, timeout=10)
        response.raise_for_status()
        config = response.json()

        self.alarm_time = config.get("time", "")
        self.armed = config.get("armed", False)
        if "current_time" in config:
            self.clock_offset = config["current_time"] - time.time()

        logger.info("Report sent", co2_level=report["co2_level"], alarm_time=self.alarm_time, armed=self.armed)
        return config

    def run(self, max_reports: Optional[int] = None):
        """Report loop; a failed post is logged and retried on the next tick"""
        self.running = True
        sent = 0
        logger.info("Starting device simulator", api_url=self.api_url, interval=self.interval)

        while self.running:
            try:
                self.send_report()
            except requests.RequestException as e:
                logger.error("Failed to send report", error=str(e))

            sent += 1
            if max_reports is not None and sent >= max_reports:
                break
            time.sleep(self.interval)

        self.running = False
        logger.info("Device simulator stopped", reports=sent)

    def stop(self):
        self.running = False
