# Models package
from .device_status import DeviceStatus
from .alarm_time import AlarmTime
from .sensor_data import SensorData

__all__ = ['DeviceStatus', 'AlarmTime', 'SensorData']
