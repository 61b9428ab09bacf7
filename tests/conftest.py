import pytest

from home_monitor.schemas.device import NO_ERROR_CODE

@pytest.fixture
def sample_report():
    return {
        "error_code": NO_ERROR_CODE,
        "co2_level": 812.5,
        "sound_level": 42.0,
        "alarm_active": False,
        "alarm_active_time": 0
    }

@pytest.fixture
def mock_env_vars(monkeypatch):
    monkeypatch.setenv("DB_HOST", "localhost")
    monkeypatch.setenv("DB_PORT", "5433")
    monkeypatch.setenv("DB_NAME", "test_db")
    monkeypatch.setenv("DB_USER", "test_user")
    monkeypatch.setenv("DB_PASSWORD", "test_password")
    monkeypatch.delenv("DATABASE_URL", raising=False)
