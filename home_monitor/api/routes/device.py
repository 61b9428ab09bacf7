"""
Device reporting and status endpoints
"""

from fastapi import APIRouter, Depends

from home_monitor.api.dependencies import get_store
from home_monitor.core.timeutil import unix_now
from home_monitor.database.store import MonitorStore
from home_monitor.schemas.alarm import DeviceUpdateResponse
from home_monitor.schemas.device import DeviceReport, DeviceStatusResponse

router = APIRouter()

@router.get("/device/status", response_model=DeviceStatusResponse)
def get_device_status(store: MonitorStore = Depends(get_store)):
    """Get the most recent device status"""
    status = store.latest_device_status()
    return DeviceStatusResponse.from_status(status, current_time=unix_now())

@router.post("/device/update", response_model=DeviceUpdateResponse)
def update_device(report: DeviceReport, store: MonitorStore = Depends(get_store)):
    """Record a device report and hand back the alarm configuration"""
    store.record_device_report(report)

    # Read after commit so the device sees the latest configuration
    alarm = store.current_alarm()
    response = DeviceUpdateResponse(current_time=unix_now())
    if alarm is not None:
        response.time = alarm.time
        response.armed = alarm.armed
    return response
