from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Database (no default: the connection string is deployment-specific)
    DATABASE_URL: str

    # JWT Authentication (no default: never ship a fixed signing secret)
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    # 0 disables expiry entirely
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 1440

    # Password hashing
    BCRYPT_ROUNDS: int = 12

    # HTTP
    API_PREFIX: str = "/api"
    CORS_ORIGINS: List[str] = ["*"]
    PORT: int = 5000

    # Application
    APP_ENV: str = "development"
    LOG_LEVEL: str = "INFO"
    # Also write logs here when set
    LOG_FILE: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
