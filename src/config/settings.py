from pydantic_settings import BaseSettings
from typing import Optional
import os

APP_ENV = os.getenv("APP_ENV", "development")

env_files = {
    "test": ".env.test",
    "development": ".env.development",
    "production": ".env.production"
}

schema_mapping = {
    "test": None,
    "development": "finance_api_development",
    "production": "finance_api_production"
}

env_file = env_files.get(APP_ENV, ".env.development")

class Settings(BaseSettings):

    JWT_SECRET_KEY: str
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRE_HOURS: int = 24
    APP_ENV: str = APP_ENV
    DATABASE_URL: str = "sqlite:///./finance_api.db"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = env_file
        env_file_encoding = "utf-8"

    @property
    def DATABASE_SCHEMA(self) -> Optional[str]:
        # sqlite has no schemas
        if self.DATABASE_URL.startswith("sqlite"):
            return None
        return schema_mapping.get(self.APP_ENV, "finance_api_development")

settings = Settings()
