from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    db_host: str = "host.docker.internal"
    db_port: int = 5432
    db_database: str = "courier"
    db_username: str = "courier"
    db_password: str = "secret"

    accepted_formats: list[str] = ["4.0", "3.1"]
    max_document_age_months: int = 1
    sender_adapters: str = "example"

    thing_service_backend: str = "memory"
