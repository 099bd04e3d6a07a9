"""
Lingosheet Configuration.

Pydantic Settings v2 — loads from .env, environment variables.
"""

from pathlib import Path
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_LOCALES_DIR = Path(__file__).parent / "locales"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # ── Application ──────────────────────────────────────────────────────
    app_name: str = "Lingosheet"
    app_version: str = "1.0.0"
    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=False, alias="DEBUG")

    # ── Languages ─────────────────────────────────────────────────────────
    base_language: str = Field(default="en", alias="BASE_LANGUAGE")
    languages: List[str] = Field(
        default=["en", "es", "de"],
        alias="LANGUAGES",
        description="Selectable language codes, in selector order",
    )
    enforce_instruction_keys: bool = Field(
        default=False,
        alias="ENFORCE_INSTRUCTION_KEYS",
        description="Reject bundles whose instruction keys differ from the base bundle",
    )

    # ── Resources ─────────────────────────────────────────────────────────
    resource_base_url: str = Field(default="", alias="RESOURCE_BASE_URL")
    locales_dir: Path = Field(default=PACKAGE_LOCALES_DIR, alias="LOCALES_DIR")
    fetch_timeout_seconds: float = Field(default=10.0, alias="FETCH_TIMEOUT_SECONDS")

    # ── Page ──────────────────────────────────────────────────────────────
    static_text_keys: List[str] = Field(
        default=[
            "ui.title",
            "ui.subtitle",
            "ui.language_label",
            "ui.checklist_heading",
            "ui.generate_button",
            "ui.output_heading",
        ],
        alias="STATIC_TEXT_KEYS",
    )

    # ── API ───────────────────────────────────────────────────────────────
    api_host: str = Field(default="0.0.0.0", alias="API_HOST")
    api_port: int = Field(default=8080, alias="API_PORT")
    api_prefix: str = "/api/v1"

    # ── Operational ────────────────────────────────────────────────────────
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(default="console", alias="LOG_FORMAT")  # json or console

    @property
    def uses_http_source(self) -> bool:
        """Bundles come over HTTP when a base URL is configured."""
        return bool(self.resource_base_url)


settings = Settings()
