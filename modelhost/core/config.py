"""
Configuration management for the modelhost client.
"""
import os
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings with environment variable support."""
    
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")
    
    # API Settings
    api_url: str = os.getenv("MODELHOST_API_URL", "https://api.sketchfab.com/v3")
    
    # Provenance tag identifying the tool that produced uploaded models
    upload_source: str = os.getenv("MODELHOST_UPLOAD_SOURCE", "")
    
    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


# Global settings instance
settings = Settings()
