from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    ENVIRONMENT: str = Field(description="Environment type", default="development")
    PROJECT_NAME: str = Field(description="Project name", default="Account Verification")

    VERIFICATION_CODE_EXPIRE_MINUTES: int = Field(
        default=5, gt=0, description="Minutes a verification code stays valid after creation"
    )

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"


settings = Settings()  # ty:ignore[missing-argument]
