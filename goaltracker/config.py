"""Application configuration."""

import os
from datetime import date

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Storage
    db_path: str = os.getenv("DB_PATH", "data/goals.db")
    static_dir: str = os.getenv("STATIC_DIR", "static")
    seed_sample_data: bool = False

    # Server
    server_host: str = os.getenv("SERVER_HOST", "0.0.0.0")
    server_port: int = int(os.getenv("SERVER_PORT", "8000"))

    # Scoring
    earnings_rate: float = 75.0  # currency units per hour of work
    on_track_threshold: int = 15
    correct_resubmitted_earnings: bool = False

    # Challenge window
    challenge_start: date = date(2024, 1, 15)
    challenge_end: date = date(2024, 7, 15)

    # Presentation
    display_timezone: str = os.getenv("DISPLAY_TIMEZONE", "Asia/Kolkata")
    clock_interval: int = 60  # seconds
    quote_interval: int = 30  # seconds

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    class Config:
        """Pydantic config."""

        env_file = ".env"
        case_sensitive = False


settings = Settings()
