"""
Sensor history Pydantic schemas
"""

from pydantic import BaseModel, field_validator
from datetime import datetime

from home_monitor.core.timeutil import as_utc

class SensorReading(BaseModel):
    """One point of the sensor history"""
    timestamp: datetime
    co2_level: float
    sound_level: float
    temperature: float

    class Config:
        from_attributes = True

    @field_validator("timestamp", mode="after")
    @classmethod
    def timestamp_in_utc(cls, value):
        return as_utc(value)
