from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional


class Settings(BaseSettings):
    database_url: str = "sqlite:///./launchpad.db"
    log_level: str = "INFO"

    # Empty key means no credentials: AI matching degrades to the
    # deterministic matcher for every role
    openai_api_key: str = ""
    openai_model: str = "gpt-4o-mini"
    llm_temperature: float = 0.7
    llm_max_tokens: int = 800
    llm_request_timeout_seconds: float = 30.0

    # AI role matching
    ai_match_top_n: int = 3
    ai_match_generous: bool = True  # Encouraging scoring guidance in the prompt

    # Frontend dev server
    cors_origins: list[str] = ["http://localhost:5173"]

    # Override for the bundled opportunities.json
    opportunities_path: Optional[str] = None

    class Config:
        env_file = ".env"


@lru_cache
def get_settings() -> Settings:
    return Settings()
