"""
Alarm configuration log
"""

from sqlalchemy import Column, Integer, Boolean, Text, true
from home_monitor.database.connection import Base

class AlarmTime(Base):
    """Alarm configuration; every change appends a row"""

    __tablename__ = "alarm_time"

    id = Column(Integer, primary_key=True, autoincrement=True)
    time = Column(Text, nullable=False)  # HH:mm
    armed = Column(Boolean, nullable=False, default=True, server_default=true())

    def __repr__(self):
        return f"<AlarmTime(id={self.id}, time={self.time}, armed={self.armed})>"
