import json
import os
from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from linkshort.core.errors import ConfigurationError

DEFAULT_CONFIG_PATH = "config.json"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    PROJECT_NAME: str = "Link Shortener"

    # Keys read from config.json
    prefix: str = ""
    db: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

    host: str = "0.0.0.0"
    port: int = 8080
    resources_dir: str = "resources"
    max_allocation_attempts: int = Field(64, ge=1)
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="LINKSHORT_",
        extra="ignore",
    )

    @field_validator("prefix")
    def normalize_prefix(cls, v):
        v = v.strip().strip("/")
        return f"{v}/" if v else ""

    @field_validator("log_level")
    def check_log_level(cls, v):
        v = v.strip().upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"unknown log level {v!r}")
        return v

    @property
    def masked_password(self) -> str:
        return self.password[:1] + "*********"


def load_settings(path=None) -> Settings:
    """
    Read the JSON config file and build Settings from it.
    Keys missing from the file fall back to LINKSHORT_* environment variables.
    """
    config_path = Path(path or os.environ.get("LINKSHORT_CONFIG", DEFAULT_CONFIG_PATH))
    if not config_path.is_file():
        raise ConfigurationError(f"{config_path} not found")

    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"{config_path} is not valid JSON: {e}")
    if not isinstance(raw, dict):
        raise ConfigurationError(f"{config_path} must contain a JSON object")

    try:
        return Settings(**raw)
    except ValidationError as e:
        missing = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
        raise ConfigurationError(
            f"invalid configuration in {config_path}: check {', '.join(missing)}"
        )
