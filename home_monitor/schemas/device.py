"""
Device report and status Pydantic schemas
"""

from enum import Enum
from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime

from home_monitor.core.timeutil import as_utc

NO_ERROR_CODE = "NO_ERROR"

class ErrorState(str, Enum):
    """Classification of the error code a device reported"""
    NONE_REPORTED = "none_reported"
    OK = "ok"
    FAULT = "fault"

    @classmethod
    def from_code(cls, error_code: Optional[str]) -> "ErrorState":
        if error_code is None:
            return cls.NONE_REPORTED
        if error_code == NO_ERROR_CODE:
            return cls.OK
        return cls.FAULT

class DeviceReport(BaseModel):
    """Schema for a report posted by the device"""
    error_code: Optional[str] = Field(None, description="Device error code, NO_ERROR when healthy")
    co2_level: float = Field(0.0, description="CO2 concentration in ppm")
    sound_level: float = Field(0.0, description="Sound level reading")
    temperature: float = Field(0.0, description="Temperature reading")
    alarm_active: bool = Field(False, description="Whether the alarm is sounding")
    alarm_active_time: int = Field(0, ge=0, description="Seconds the alarm has been sounding")

    class Config:
        strict = True

class DeviceStatusResponse(BaseModel):
    """Schema for the current device status"""
    id: int = 0
    last_seen: Optional[datetime] = None
    error_code: Optional[str] = None
    error_state: ErrorState = ErrorState.NONE_REPORTED
    co2_level: float = 0.0
    sound_level: float = 0.0
    temperature: float = 0.0
    alarm_active: bool = False
    alarm_active_time: int = 0
    current_time: int = Field(..., description="Server Unix time in seconds")

    @field_validator("last_seen", mode="after")
    @classmethod
    def last_seen_in_utc(cls, value):
        return as_utc(value)

    @classmethod
    def from_status(cls, status, current_time: int) -> "DeviceStatusResponse":
        if status is None:
            return cls(current_time=current_time)
        return cls(
            id=status.id,
            last_seen=status.last_seen,
            error_code=status.error_code,
            error_state=ErrorState.from_code(status.error_code),
            co2_level=status.co2_level,
            sound_level=status.sound_level,
            temperature=status.temperature,
            alarm_active=status.alarm_active,
            alarm_active_time=status.alarm_active_time,
            current_time=current_time
        )
