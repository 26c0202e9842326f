from functools import lru_cache
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    # Supabase (PUBLIC_* names are accepted for parity with the web frontend env)
    supabase_url: str = Field(
        default="",
        validation_alias=AliasChoices("supabase_url", "public_supabase_url"),
    )
    supabase_anon_key: str = Field(
        default="",
        validation_alias=AliasChoices("supabase_anon_key", "public_supabase_anon_key"),
    )

    # Admin section
    admin_path: str = "/admin"
    login_path: str = "/admin/login"
    admin_home_path: str = "/admin"
    public_base_url: str = "http://localhost:8000"  # used to build the OAuth redirect_to
    oauth_providers: str = "google,github"

    # Session cookies
    cookie_secure: bool = False
    cookie_max_age: int = 400 * 24 * 60 * 60  # 400 days, browser upper bound

    # App
    app_name: str = "schedule-admin"
    debug: bool = False
    environment: str = "development"  # development | staging | production
    log_level: str = "INFO"
    cors_origins: str = "http://localhost:3000,http://localhost:5173,http://127.0.0.1:3000,http://127.0.0.1:5173"
    rate_limit: str = "100/minute"  # slowapi format, e.g. "100/minute"
    auth_rate_limit: str = "30/minute"
    rate_limit_enabled: bool = True

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def get_cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    def get_oauth_providers_list(self) -> List[str]:
        return [p.strip().lower() for p in self.oauth_providers.split(",") if p.strip()]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",  # No prefix needed
        extra="ignore",
        populate_by_name=True,
        frozen=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Process-wide configuration, read once from the environment."""
    return Settings()


settings = get_settings()
