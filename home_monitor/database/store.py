"""
Store for device reports, alarm configuration and sensor history.

All tables are append-only logs: the current device status and the current
alarm configuration are always the newest row. A ``MonitorStore`` is built
once at startup and handed to the API layer, which never touches sessions
directly.
"""

from datetime import datetime, timedelta
from typing import Dict, Iterable, List, Optional, Tuple

import structlog
from sqlalchemy import text
from sqlalchemy.orm import sessionmaker

from home_monitor.core.timeutil import utcnow
from home_monitor.database.connection import Base, create_db_engine, create_session_factory
from home_monitor.models import AlarmTime, DeviceStatus, SensorData
from home_monitor.schemas.device import DeviceReport

logger = structlog.get_logger(__name__)

class MonitorStore:
    """SQL-backed store shared by all request handlers"""

    def __init__(self, session_factory: sessionmaker, sensor_window_hours: int = 24):
        self._session_factory = session_factory
        self.sensor_window = timedelta(hours=sensor_window_hours)

    @classmethod
    def from_url(cls, database_url: str, sensor_window_hours: int = 24, echo: bool = False) -> "MonitorStore":
        engine = create_db_engine(database_url, echo=echo)
        return cls(create_session_factory(engine), sensor_window_hours=sensor_window_hours)

    @classmethod
    def from_settings(cls, settings) -> "MonitorStore":
        return cls.from_url(
            settings.database_url,
            sensor_window_hours=settings.sensor_window_hours,
            echo=settings.debug
        )

    @property
    def engine(self):
        return self._session_factory.kw["bind"]

    def create_schema(self):
        """Create all tables that do not exist yet"""
        Base.metadata.create_all(bind=self.engine)
        logger.info("Database tables created successfully")

    def check_connection(self):
        """Run a trivial query; raises if the database is unreachable"""
        with self._session_factory() as session:
            session.execute(text("SELECT 1"))

    # Device reports

    def record_device_report(self, report: DeviceReport) -> DeviceStatus:
        """Store a device report as one status row and one sensor row, atomically"""
        timestamp = utcnow()
        status = self._status_row(report, timestamp)

        with self._session_factory() as session:
            with session.begin():
                session.add(status)
                session.flush()
                session.add(self._sensor_row(report, timestamp))

        logger.info("Device report stored", status_id=status.id, error_code=report.error_code,
                    alarm_active=report.alarm_active)
        return status

    def backfill_reports(self, reports: Iterable[Tuple[datetime, DeviceReport]]) -> int:
        """Insert historical reports with their own timestamps in one transaction"""
        count = 0
        with self._session_factory() as session:
            with session.begin():
                for timestamp, report in reports:
                    session.add(self._status_row(report, timestamp))
                    session.add(self._sensor_row(report, timestamp))
                    count += 1

        logger.info("Reports backfilled", count=count)
        return count

    def _status_row(self, report: DeviceReport, timestamp: datetime) -> DeviceStatus:
        return DeviceStatus(
            last_seen=timestamp,
            error_code=report.error_code,
            co2_level=report.co2_level,
            sound_level=report.sound_level,
            temperature=report.temperature,
            alarm_active=report.alarm_active,
            alarm_active_time=report.alarm_active_time
        )

    def _sensor_row(self, report: DeviceReport, timestamp: datetime) -> SensorData:
        return SensorData(
            timestamp=timestamp,
            co2_level=report.co2_level,
            sound_level=report.sound_level,
            temperature=report.temperature
        )

    def latest_device_status(self) -> Optional[DeviceStatus]:
        with self._session_factory() as session:
            return (
                session.query(DeviceStatus)
                .order_by(DeviceStatus.last_seen.desc(), DeviceStatus.id.desc())
                .first()
            )

    # Alarm configuration

    def current_alarm(self) -> Optional[AlarmTime]:
        with self._session_factory() as session:
            return session.query(AlarmTime).order_by(AlarmTime.id.desc()).first()

    def add_alarm_time(self, alarm_time: str, armed: bool = True) -> AlarmTime:
        alarm = AlarmTime(time=alarm_time, armed=armed)
        with self._session_factory() as session:
            with session.begin():
                session.add(alarm)

        logger.info("Alarm time set", time=alarm_time, armed=armed)
        return alarm

    def set_alarm_armed(self, armed: bool) -> Optional[AlarmTime]:
        """Append a copy of the current alarm with the new armed flag.

        Returns None without writing when no alarm time was ever set.
        """
        with self._session_factory() as session:
            with session.begin():
                current = session.query(AlarmTime).order_by(AlarmTime.id.desc()).first()
                if current is None:
                    logger.info("No alarm configured, armed flag ignored", armed=armed)
                    return None
                alarm = AlarmTime(time=current.time, armed=armed)
                session.add(alarm)

        logger.info("Alarm armed flag changed", time=alarm.time, armed=armed)
        return alarm

    # Sensor history

    def sensor_history(self, now: Optional[datetime] = None) -> List[SensorData]:
        """Readings newer than the trailing window, oldest first"""
        since = (now or utcnow()) - self.sensor_window
        with self._session_factory() as session:
            return (
                session.query(SensorData)
                .filter(SensorData.timestamp > since)
                .order_by(SensorData.timestamp.asc(), SensorData.id.asc())
                .all()
            )

    # Maintenance

    def prune_history(self, retention_days: int, now: Optional[datetime] = None) -> Dict[str, int]:
        """Delete status and sensor rows older than the retention period.

        The newest status row is always kept so the current status survives.
        """
        cutoff = (now or utcnow()) - timedelta(days=retention_days)

        with self._session_factory() as session:
            with session.begin():
                latest = (
                    session.query(DeviceStatus.id)
                    .order_by(DeviceStatus.last_seen.desc(), DeviceStatus.id.desc())
                    .first()
                )
                status_query = session.query(DeviceStatus).filter(DeviceStatus.last_seen < cutoff)
                if latest is not None:
                    status_query = status_query.filter(DeviceStatus.id != latest.id)
                deleted_status = status_query.delete(synchronize_session=False)
                deleted_sensor = (
                    session.query(SensorData)
                    .filter(SensorData.timestamp < cutoff)
                    .delete(synchronize_session=False)
                )

        logger.info("History pruned", cutoff=cutoff.isoformat(),
                    device_status=deleted_status, sensor_data=deleted_sensor)
        return {"device_status": deleted_status, "sensor_data": deleted_sensor}

    def count_rows(self, model) -> int:
        with self._session_factory() as session:
            return session.query(model).count()
