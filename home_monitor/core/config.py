"""
Configuration settings for the Home Monitor backend
"""

from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    """Application settings"""

    # Database
    db_host: str = "postgres"
    db_port: str = "5432"
    db_name: str = "homeserver"
    db_user: str = "postgres"
    db_password: str = "postgres"
    database_url: str = ""

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 8080
    debug: bool = False
    cors_origins: List[str] = ["*"]

    # Sensor history
    sensor_window_hours: int = 24
    metrics_retention_days: int = 90

    # Device simulator
    simulator_api_url: str = "http://localhost:8080"
    simulator_interval_seconds: int = 10

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = False

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        # Build database_url from components unless given explicitly
        if not self.database_url:
            self.database_url = f"postgresql+psycopg://{self.db_user}:{self.db_password}@{self.db_host}:{self.db_port}/{self.db_name}"

# Global settings instance
settings = Settings()
