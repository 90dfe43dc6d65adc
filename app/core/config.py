from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "DocStore"
    app_version: str = "1.0.0"
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]

    model_config = {"env_file": ".env", "extra": "ignore"}

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        # logging принимает только имена уровней в верхнем регистре
        return v.strip().upper()


settings = Settings()
