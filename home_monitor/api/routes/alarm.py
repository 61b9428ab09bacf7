"""
Alarm configuration endpoints
"""

from fastapi import APIRouter, Depends, status

from home_monitor.api.dependencies import get_store
from home_monitor.database.store import MonitorStore
from home_monitor.schemas.alarm import AlarmArmRequest, AlarmArmResponse, AlarmConfig, AlarmTimeCreate

router = APIRouter()

@router.get("/alarm", response_model=AlarmConfig)
def get_alarm(store: MonitorStore = Depends(get_store)):
    """Get the current alarm configuration"""
    return AlarmConfig.from_row(store.current_alarm())

@router.post("/alarm", response_model=AlarmConfig, status_code=status.HTTP_201_CREATED)
def set_alarm(alarm_data: AlarmTimeCreate, store: MonitorStore = Depends(get_store)):
    """Set a new alarm time"""
    armed = True if alarm_data.armed is None else alarm_data.armed
    alarm = store.add_alarm_time(alarm_data.time, armed=armed)
    return AlarmConfig.from_row(alarm)

@router.post("/alarm/arm", response_model=AlarmArmResponse)
def arm_alarm(arm_data: AlarmArmRequest, store: MonitorStore = Depends(get_store)):
    """Arm or disarm the alarm"""
    store.set_alarm_armed(arm_data.armed)
    return AlarmArmResponse(armed=arm_data.armed)
