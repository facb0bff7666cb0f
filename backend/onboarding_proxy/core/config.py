# onboarding_proxy/core/config.py
from functools import lru_cache
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_BASE = "https://mayadestek-api-355l5o2k7q7q-uc.a.run.app"
ONBOARDING_START_PATH = "/public/onboarding/start"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # —–– Upstream onboarding backend
    MAYADESTEK_API_KEY: Optional[str] = Field(None, description="Server-only secret, never sent to the browser")
    MAYADESTEK_API_BASE: str = Field(DEFAULT_API_BASE)
    UPSTREAM_TIMEOUT_SECONDS: float = Field(30.0)

    # —–– schema_not_ready retry
    SCHEMA_RETRY_MAX_ATTEMPTS: int = Field(6, ge=1)
    SCHEMA_RETRY_STEP_SECONDS: float = Field(0.5, ge=0)

    # —–– Build identifier
    VERCEL_GIT_COMMIT_SHA: Optional[str] = Field(None)
    GIT_COMMIT_SHA: Optional[str] = Field(None)

    # —–– CORS
    CORS_ORIGINS: str = Field("*")

    # —–– Logging
    LOG_LEVEL: str = Field("INFO")

    def cors_list(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def build_id(self) -> str:
        for sha in (self.VERCEL_GIT_COMMIT_SHA, self.GIT_COMMIT_SHA):
            if sha and sha.strip():
                return sha.strip()[:7]
        return "local"

    @property
    def api_base(self) -> str:
        return self.MAYADESTEK_API_BASE.strip().rstrip("/") or DEFAULT_API_BASE

    @property
    def onboarding_url(self) -> str:
        return f"{self.api_base}{ONBOARDING_START_PATH}"


@lru_cache
def get_settings() -> Settings:
    return Settings()
