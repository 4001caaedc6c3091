"""Application configuration loaded from environment variables."""
import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # Storage location
    data_path: str = os.getenv("DATA_PATH", os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))
    db_filename: str = "ucenpulse.db"

    @property
    def db_path(self) -> str:
        return os.path.join(self.data_path, self.db_filename)

    # Load sample records when the store is empty
    seed_defaults: bool = True

    # API configuration
    api_host: str = "127.0.0.1"
    api_port: int = 8082
    log_level: str = "INFO"

    # CORS
    cors_origins: list[str] = ["http://localhost:5173", "http://127.0.0.1:5173"]

    class Config:
        env_prefix = "PULSE_"


@lru_cache
def get_settings() -> Settings:
    return Settings()
