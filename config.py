"""
config.py — Konfiguracja aplikacji przez zmienne środowiskowe.
Wszystkie zmienne mają prefiks RPNTREE_.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict

from contracts import Domain


class Settings(BaseSettings):
    # Parser
    default_domain: Domain = Domain.ARITHMETIC
    max_expression_length: int = 10_000  # limit tylko dla API

    # Logging
    log_level: str = "INFO"

    # App
    app_title: str = "rpntree"
    app_version: str = "0.1.0"

    model_config = SettingsConfigDict(env_prefix="RPNTREE_", env_file=".env", extra="ignore")
