"""
Application configuration.
Values are loaded from environment variables or a local .env file.
"""
from typing import List, Literal
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""
    
    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./fitness.db"
    
    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    
    # CORS
    CORS_ORIGINS: List[str] = ["*"]
    
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"  # json or console
    
    # Insert two sample workouts when the store is empty at startup
    SEED_SAMPLE_DATA: bool = True
    
    # What the stats engine does with a record whose date is not YYYY-MM-DD:
    # "skip" drops it from every aggregation, "reject" fails the whole request
    MALFORMED_RECORD_POLICY: Literal["skip", "reject"] = "skip"
    
    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
