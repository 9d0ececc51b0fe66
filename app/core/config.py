from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    project_name: str = "Trip Tag Planner"
    log_level: str = "INFO"

    fetch_prefix: str = "/plan-my-trip/"
    tag_length: int = Field(default=8, ge=1)
    tag_max_attempts: int = Field(default=1, ge=1, description="Tag candidates tried before accepting a collision")

    openai_api_key: str = Field(default="", description="Optional OpenAI API key")
    openai_model_itinerary: str = "gpt-4.1-mini"
    openai_timeout_seconds: float = 60.0

    supabase_url: Optional[str] = None
    supabase_anon_key: Optional[str] = None
    supabase_table: str = "itinerary_tags"

    use_supabase: bool = False

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()  # type: ignore[arg-type]


settings = get_settings()
