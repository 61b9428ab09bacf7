"""
Alarm configuration Pydantic schemas
"""

from pydantic import BaseModel, Field
from typing import Optional

ALARM_TIME_PATTERN = r"^([01][0-9]|2[0-3]):[0-5][0-9]$"

class AlarmConfig(BaseModel):
    """Current alarm configuration; empty time when none is set"""
    time: str = ""
    armed: bool = False

    @classmethod
    def from_row(cls, alarm) -> "AlarmConfig":
        if alarm is None:
            return cls()
        return cls(time=alarm.time, armed=alarm.armed)

class AlarmTimeCreate(BaseModel):
    """Schema for setting the alarm time"""
    time: str = Field(..., pattern=ALARM_TIME_PATTERN, description="Alarm time as HH:mm")
    armed: Optional[bool] = Field(None, description="Armed flag, true when omitted")

    class Config:
        strict = True

class AlarmArmRequest(BaseModel):
    """Schema for arming or disarming the alarm"""
    armed: bool

    class Config:
        strict = True

class AlarmArmResponse(BaseModel):
    armed: bool

class DeviceUpdateResponse(AlarmConfig):
    """Alarm configuration handed back to the device after a report"""
    current_time: int = Field(..., description="Server Unix time in seconds")
