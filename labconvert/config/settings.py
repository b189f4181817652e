from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"

    default_table_format: str = "tomkat"

    output_dir: str = "output"
    output_indent: int = 2

    archive_skip_hidden: bool = True
