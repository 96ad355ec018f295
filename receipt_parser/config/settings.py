from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    extraction_engine: str = "openai"
    extraction_api_key: str = ""
    extraction_model_name: str = "gpt-4o-mini"
    extraction_base_url: str | None = None
    extraction_timeout_seconds: int = 60

    pdf_engine: str = "pdfplumber"

    structuring_provider: str = "openai"
    structuring_api_key: str = ""
    structuring_model_name: str = "gpt-4o-mini"
    structuring_base_url: str | None = None
    structuring_timeout_seconds: int = 30
    # Clamped to 0.0-0.2 by the structurer.
    structuring_temperature: float = 0.0

    persistence_target: str = "google_sheets"
    persistence_timeout_seconds: int = 30

    google_sheets_api_url: str = "https://sheets.googleapis.com/v4/spreadsheets"
    google_sheets_range: str = "A1"

    notion_api_url: str = "https://api.notion.com/v1/pages"
    notion_api_version: str = "2022-06-28"

    db_host: str = "host.docker.internal"
    db_port: int = 5432
    db_database: str = "receipts"
    db_username: str = "receipts"
    db_password: str = "secret"
