import unittest
import sys
import os
from unittest.mock import MagicMock

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from home_monitor.database.store import MonitorStore
from home_monitor.main import create_app
from tests.support import TEST_DATABASE_URL, make_client, make_store

def unreachable_store():
    store = MagicMock(spec=MonitorStore)
    store.check_connection.side_effect = OperationalError("SELECT 1", {}, Exception("connection refused"))
    return store

class TestHealth(unittest.TestCase):
    """Test cases for health endpoints"""

    def test_health(self):
        client = make_client(make_store())
        body = client.get("/api/health").json()
        self.assertEqual(body["status"], "healthy")
        self.assertEqual(body["service"], "Home Monitor API")

    def test_detailed_health_connected(self):
        client = make_client(make_store())
        body = client.get("/api/health/detailed").json()
        self.assertEqual(body["database"], "connected")
        self.assertEqual(body["status"], "healthy")

    def test_detailed_health_disconnected(self):
        client = TestClient(create_app(store=unreachable_store()))
        body = client.get("/api/health/detailed").json()
        self.assertEqual(body["database"], "disconnected")
        self.assertEqual(body["status"], "unhealthy")

class TestLifespan(unittest.TestCase):
    """Test cases for application startup"""

    def test_startup_creates_tables(self):
        store = MonitorStore.from_url(TEST_DATABASE_URL)
        with TestClient(create_app(store=store)) as client:
            self.assertEqual(client.get("/api/sensor-data").json(), [])
            response = client.post("/api/device/update", json={"co2_level": 500.0})
            self.assertEqual(response.status_code, 200)

    def test_startup_fails_without_database(self):
        # Depending on the anyio version the error may arrive wrapped in a group
        with self.assertRaises(Exception):
            with TestClient(create_app(store=unreachable_store())):
                pass

class TestStoreErrors(unittest.TestCase):
    """Store failures surface as server errors with their detail"""

    def test_read_failure_returns_500(self):
        store = MagicMock(spec=MonitorStore)
        store.current_alarm.side_effect = OperationalError("SELECT", {}, Exception("server closed the connection"))
        client = TestClient(create_app(store=store))

        response = client.get("/api/alarm")
        self.assertEqual(response.status_code, 500)
        self.assertIn("server closed the connection", response.json()["detail"])

if __name__ == '__main__':
    unittest.main()
