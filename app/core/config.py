from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application configuration settings.

    This class loads configuration values from environment variables
    and optionally from a `.env` file. It uses Pydantic Settings
    to provide type validation and default values.

    Environment variables take precedence over `.env` values.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ---------------------------------------------------------------------
    # Application settings
    # ---------------------------------------------------------------------

    app_name: str = Field(
        default="wind-api",
        alias="APP_NAME",
        description="Application name displayed in logs and API documentation",
    )

    environment: str = Field(
        default="local",
        alias="ENVIRONMENT",
        description="Runtime environment (local, dev, prod)",
    )

    log_level: str = Field(
        default="INFO",
        alias="LOG_LEVEL",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )

    host: str = Field(default="0.0.0.0", alias="HOST")

    port: int = Field(default=3000, alias="PORT")

    cors_allow_origins: List[str] = Field(
        default_factory=lambda: ["*"],
        alias="CORS_ALLOW_ORIGINS",
        description="Origins allowed to call the API from a browser (JSON list)",
    )

    # ---------------------------------------------------------------------
    # AySA telemetry API
    # ---------------------------------------------------------------------

    aysa_base_url: str = Field(
        default="https://www.aysa.com.ar/api/estaciones/getVariablesEstacionesHistorico",
        alias="AYSA_BASE_URL",
        description="Base URL of the AySA historical variables endpoint",
    )

    aysa_bernal_id: str = Field(
        default="B8046881-1BC3-43F8-9C9B-841AC482CF85",
        alias="AYSA_BERNAL_ID",
    )

    aysa_berazategui_id: str = Field(
        default="5FFBD91B-1EBA-49CE-9AFA-2129F9397D22",
        alias="AYSA_BERAZATEGUI_ID",
    )

    telemetry_timeout_s: float = Field(
        default=15.0,
        alias="TELEMETRY_TIMEOUT_S",
        description="Per-request timeout for the AySA API, in seconds",
    )

    # ---------------------------------------------------------------------
    # UNLP (FCAG) dashboard pages
    # ---------------------------------------------------------------------

    unlp_torre_url: str = Field(
        default="https://meteo.fcaglp.unlp.edu.ar/davis/torre/torre.htm",
        alias="UNLP_TORRE_URL",
        description="Tower page, source of the wind readings",
    )

    unlp_campo_url: str = Field(
        default="https://meteo.fcaglp.unlp.edu.ar/davis/campo/campo.htm",
        alias="UNLP_CAMPO_URL",
        description="Field page, source of temperature, humidity, pressure and rain",
    )

    html_timeout_s: float = Field(
        default=10.0,
        alias="HTML_TIMEOUT_S",
        description="Per-request timeout for the UNLP pages, in seconds",
    )

    # ---------------------------------------------------------------------
    # Upstream HTTP
    # ---------------------------------------------------------------------

    upstream_user_agent: str = Field(
        default="Mozilla/5.0 (wind-api)",
        alias="UPSTREAM_USER_AGENT",
    )

    upstream_verify_tls: bool = Field(
        default=True,
        alias="UPSTREAM_VERIFY_TLS",
        description="Verify upstream TLS certificates (disable for hosts with broken chains)",
    )


# Singleton settings instance
settings = Settings()
