"""
Shared helpers for building an app over an in-memory database
"""

from datetime import datetime

from fastapi.testclient import TestClient

from home_monitor.database.store import MonitorStore
from home_monitor.main import create_app

TEST_DATABASE_URL = "sqlite://"

def make_store(store_class=MonitorStore, sensor_window_hours=24):
    store = store_class.from_url(TEST_DATABASE_URL, sensor_window_hours=sensor_window_hours)
    store.create_schema()
    return store

def make_client(store):
    return TestClient(create_app(store=store))

def parse_timestamp(value):
    """Parse an ISO timestamp from a response, accepting a Z suffix"""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)
