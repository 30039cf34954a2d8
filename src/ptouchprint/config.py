"""Configuration management for ptouchprint."""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ptouchprint.models.printer import PrinterConfig

logger = logging.getLogger(__name__)


class AppConfig(BaseModel):
    """Application configuration loaded from config.yaml."""

    printers: list[PrinterConfig] = Field(default_factory=list)

    def get_printer(self, name: str) -> PrinterConfig | None:
        """Get a printer by name."""
        for printer in self.printers:
            if printer.name == name:
                return printer
        return None


class Settings(BaseSettings):
    """Environment-based settings."""

    model_config = SettingsConfigDict(
        env_prefix="PTOUCHPRINT_",
        env_file=".env",
        extra="ignore",
        env_parse_none_str="none",
    )

    config_file: Path = Path("config.yaml")
    debug: bool = False
    connect_timeout: float = 30.0  # Seconds to wait for a TCP connection
    spooler_timeout: float | None = 60.0  # Seconds to wait for lpr, None waits forever
    lpr_path: Path = Path("/usr/bin/lpr")


def load_config(config_path: Path) -> AppConfig:
    """Load application configuration from YAML file."""
    if not config_path.exists():
        logger.debug(f"Config file {config_path} not found, using defaults")
        return AppConfig()

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    # YAML returns None for empty keys
    if data.get("printers") is None:
        data["printers"] = []

    config = AppConfig.model_validate(data)
    logger.debug(f"Loaded {len(config.printers)} printer(s) from {config_path}")
    return config
