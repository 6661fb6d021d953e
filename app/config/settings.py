from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    # Supabase
    supabase_url: str = ""
    supabase_key: str = ""

    # App
    app_name: str = "promptstash"
    debug: bool = False
    environment: str = "development"  # development | staging | production
    log_level: str = "INFO"
    cors_origins: str = "http://localhost:3000,http://localhost:5173,http://127.0.0.1:3000,http://127.0.0.1:5173"
    rate_limit: str = "100/minute"  # slowapi format, e.g. "100/minute"
    app_root_path: str = "/app"  # where "/" redirects to

    # Prompts
    public_slug_length: int = 10
    manual_save_creates_version: bool = True
    autosave_creates_version: bool = False
    export_format_version: str = "1.0"

    # Client interaction timings (seconds)
    search_debounce_seconds: float = 0.3
    autosave_debounce_seconds: float = 1.0

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def get_cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",  # No prefix needed
        extra="ignore"
    )


settings = Settings()
