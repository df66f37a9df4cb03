import logging

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "NOTION_",
        "extra": "ignore",
    }

    # Integration secret from https://www.notion.so/my-integrations
    api_key: str | None = None

    # API
    api_base: str = "https://api.notion.com/v1"
    api_version: str = "2022-06-28"
    timeout: float = 30.0

    log_level: str = "info"


def configure_logging(settings: Settings) -> None:
    """Configure root logging for applications built on this library."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
