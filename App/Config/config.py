"""Settings for application, utilizing pydantic"""
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

class Settings(BaseSettings):
    app_env: str = Field("local", description="Deployment environment name (APP_ENV)")
    api_host: str = Field("0.0.0.0", description="Listening interface (API_HOST)")
    api_port: int = Field(3030, description="Listening TCP port (API_PORT)")

    # transport
    max_body_bytes: int = Field(16 * 1024, gt=0, description="Request body cap in bytes (MAX_BODY_BYTES)")

    # logging
    log_level: str = Field("INFO", description="Root logging level (LOG_LEVEL)")

    model_config = SettingsConfigDict(
        env_file=Path(__file__).parent.parent / ".env",
        extra="ignore"
    )

settings = Settings()
