"""
Sensor readings time series
"""

from sqlalchemy import Column, Integer, DateTime, Float
from home_monitor.database.connection import Base

class SensorData(Base):
    """Sensor readings for charting"""

    __tablename__ = "sensor_data"

    id = Column(Integer, primary_key=True, autoincrement=True)
    timestamp = Column(DateTime, nullable=False, index=True)
    co2_level = Column(Float, nullable=False)
    sound_level = Column(Float, nullable=False, default=0)
    temperature = Column(Float, nullable=False, default=0)

    def __repr__(self):
        return f"<SensorData(timestamp={self.timestamp}, co2={self.co2_level})>"
