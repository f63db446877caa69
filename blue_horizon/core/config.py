"""
Configuration settings for Blue Horizon API
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """Application settings"""
    
    # Supabase Configuration (hosted sensor database)
    SUPABASE_URL: Optional[str] = None
    SUPABASE_SERVICE_KEY: Optional[str] = None
    SUPABASE_TABLE: str = "sensor_data"
    DATA_SOURCE_TIMEOUT_SECONDS: float = 10.0
    
    # Local development data source (JSON file of sensor records)
    SAMPLE_DATA_FILE: Optional[str] = None
    
    # Server Configuration
    HOST: str = "0.0.0.0"
    PORT: int = 3001
    LOG_LEVEL: str = "INFO"
    
    # CORS Configuration
    FRONTEND_URL: str = "http://localhost:3000"
    
    @property
    def supabase_configured(self) -> bool:
        return bool(self.SUPABASE_URL and self.SUPABASE_SERVICE_KEY)
    
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


# Create settings instance
settings = Settings()
