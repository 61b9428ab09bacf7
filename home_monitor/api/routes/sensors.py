"""
Sensor history endpoints
"""

from fastapi import APIRouter, Depends
from typing import List

from home_monitor.api.dependencies import get_store
from home_monitor.database.store import MonitorStore
from home_monitor.schemas.sensor import SensorReading

router = APIRouter()

@router.get("/sensor-data", response_model=List[SensorReading])
def get_sensor_data(store: MonitorStore = Depends(get_store)):
    """Get readings inside the trailing history window, oldest first"""
    return [SensorReading.model_validate(row) for row in store.sensor_history()]
