"""
Device status log, one row per device report
"""

from sqlalchemy import Column, Integer, BigInteger, Boolean, DateTime, Float, Text
from home_monitor.database.connection import Base

class DeviceStatus(Base):
    """Append-only device status log; the newest row is the current status"""

    __tablename__ = "device_status"

    id = Column(Integer, primary_key=True, autoincrement=True)
    last_seen = Column(DateTime, nullable=False, index=True)
    error_code = Column(Text)
    co2_level = Column(Float, nullable=False, default=0)
    sound_level = Column(Float, nullable=False, default=0)
    temperature = Column(Float, nullable=False, default=0)
    alarm_active = Column(Boolean, nullable=False, default=False)
    alarm_active_time = Column(BigInteger, nullable=False, default=0)  # seconds

    def __repr__(self):
        return f"<DeviceStatus(id={self.id}, last_seen={self.last_seen}, error_code={self.error_code})>"
