#!/usr/bin/env python3
"""
Configuration Management for Up → Actual Sync

Loads the JSON configuration file once at startup and builds an explicit
Config value that is passed to every stage. Secrets and ambient settings may
be overridden from the environment (or a .env file).
"""

import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from .json_utils import read_json

# Load environment variables from .env file
load_dotenv()

DEFAULT_CONFIG_FILENAME = "config.json"


class ConfigError(ValueError):
    """Raised when the configuration file is missing, unreadable or invalid."""


@dataclass
class UpConfig:
    """Up banking API configuration."""

    api_key: str | None = None
    base_url: str = "https://api.up.com.au/api/v1"
    timeout: int = 30
    page_size: int = 100
    # Client-side cap per account against runaway pagination
    transaction_limit: int = 1000


@dataclass
class ActualConfig:
    """Actual Budget server configuration."""

    server_url: str = ""
    password: str = field(default="", repr=False)
    budget_id: str = ""
    account_name: str = ""
    e2ee: bool = False
    encryption_password: str | None = field(default=None, repr=False)


@dataclass
class Config:
    """
    Main configuration for a sync run.

    Built once before either stage runs and handed to each of them.
    """

    config_path: Path
    csv_file_path: Path
    up: UpConfig
    actual: ActualConfig

    # Application settings
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_file(cls, path: str | Path) -> "Config":
        """
        Create configuration from a JSON config file.

        Args:
            path: Location of the config file

        Returns:
            Config instance (not yet validated)

        Raises:
            ConfigError: If the file is missing or is not a JSON object
        """
        config_path = Path(path).expanduser().resolve()
        if not config_path.exists():
            raise ConfigError(f"Config file not found: {config_path}")

        try:
            data = read_json(config_path)
        except (OSError, ValueError) as e:
            raise ConfigError(f"Could not read config file {config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config file must contain a JSON object: {config_path}")

        return cls.from_dict(data, config_path)

    @classmethod
    def from_dict(cls, data: dict[str, Any], config_path: Path) -> "Config":
        """Create configuration from parsed config-file keys plus environment overrides."""
        csv_setting = str(data.get("csvFilePath") or "")
        csv_file_path = Path(csv_setting).expanduser() if csv_setting else Path()
        if csv_setting and not csv_file_path.is_absolute():
            # Relative paths are anchored at the config file, not the working directory
            csv_file_path = config_path.parent / csv_file_path

        up = UpConfig(
            api_key=os.getenv("UP_API_TOKEN") or data.get("apiKey") or None,
            timeout=_env_int("UP_TIMEOUT", 30),
            page_size=_env_int("UP_PAGE_SIZE", 100),
        )

        actual = ActualConfig(
            server_url=str(data.get("serverURL") or ""),
            password=os.getenv("ACTUAL_PASSWORD") or str(data.get("password") or ""),
            budget_id=str(data.get("budgetId") or ""),
            account_name=str(data.get("accountName") or ""),
            e2ee=_parse_bool(data.get("EE2E", False)),
            encryption_password=(
                os.getenv("ACTUAL_ENCRYPTION_PASSWORD") or data.get("encryptionPassword") or None
            ),
        )

        return cls(
            config_path=config_path,
            csv_file_path=csv_file_path,
            up=up,
            actual=actual,
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        for key, value in [
            ("csvFilePath", str(self.csv_file_path) if self.csv_file_path != Path() else ""),
            ("serverURL", self.actual.server_url),
            ("password", self.actual.password),
            ("budgetId", self.actual.budget_id),
            ("accountName", self.actual.account_name),
        ]:
            if not value:
                errors.append(f"{key} is required")

        if self.actual.e2ee and not self.actual.encryption_password:
            errors.append("encryptionPassword is required when EE2E is enabled")

        if self.up.timeout <= 0:
            errors.append("Up timeout must be positive")
        if not 1 <= self.up.page_size <= 100:
            errors.append("Up page size must be 1-100")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = logging.DEBUG if self.debug else getattr(logging, self.log_level, logging.INFO)

        if self.debug:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

        # Reduce noise from HTTP libraries unless debugging
        if not self.debug:
            logging.getLogger("urllib3").setLevel(logging.WARNING)
            logging.getLogger("requests").setLevel(logging.WARNING)

    def get_sensitive_fields(self) -> list:
        """Get list of field names that contain sensitive data."""
        return [
            "up.api_key",
            "actual.password",
            "actual.encryption_password",
        ]

    def to_dict(self, include_sensitive: bool = False) -> dict[str, Any]:
        """Convert configuration to dictionary, optionally excluding sensitive data."""
        result: dict[str, Any] = {}

        for field_name, field_value in self.__dict__.items():
            if hasattr(field_value, "__dict__") and not isinstance(field_value, Path):
                nested_dict: dict[str, Any] = {}
                for nested_name, nested_value in field_value.__dict__.items():
                    full_field_name = f"{field_name}.{nested_name}"

                    if (
                        not include_sensitive
                        and full_field_name in self.get_sensitive_fields()
                        and nested_value
                    ):
                        nested_dict[nested_name] = "***REDACTED***"
                    else:
                        nested_dict[nested_name] = nested_value

                result[field_name] = nested_dict
            elif isinstance(field_value, Path):
                result[field_name] = str(field_value)
            elif isinstance(field_value, Enum):
                result[field_name] = field_value.value
            else:
                result[field_name] = field_value

        return result


def _parse_bool(value: Any) -> bool:
    """Interpret JSON booleans and the usual string spellings."""
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes")
    return bool(value)


def _env_int(name: str, default: int) -> int:
    """Read an integer environment variable."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from e


def default_config_path() -> Path:
    """Config path from UPSYNC_CONFIG, falling back to ./config.json."""
    return Path(os.getenv("UPSYNC_CONFIG", DEFAULT_CONFIG_FILENAME))


def load_config(path: str | Path | None = None) -> Config:
    """
    Load and validate configuration.

    Args:
        path: Config file location. If None, uses default_config_path()

    Returns:
        Validated Config

    Raises:
        ConfigError: If the file cannot be loaded or fails validation
    """
    config = Config.from_file(path if path is not None else default_config_path())

    errors = config.validate()
    if errors:
        raise ConfigError(f"Configuration validation failed: {'; '.join(errors)}")

    return config
