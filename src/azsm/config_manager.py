"""Configuration management module.

This module handles persistent configuration storage using TOML format.
Stores user preferences like the default hosted service, deployment slot,
snapshot file and output format.

Security:
- Config file permissions: 0600 (owner read/write only)
- Path validation
"""

import logging
import os
import tempfile
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

import tomli
import tomlkit

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("table", "json")
DEPLOYMENT_SLOTS = ("Production", "Staging")


class ConfigError(Exception):
    """Raised when configuration operations fail."""

    pass


@dataclass
class AzsmConfig:
    """Azsm configuration data."""

    default_service_name: str | None = None
    default_slot: str = "Production"
    snapshot_path: str | None = None
    output_format: str = "table"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, excluding None values."""
        data = asdict(self)
        # TOML has no null
        return {k: v for k, v in data.items() if v is not None}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AzsmConfig":
        """Create from dictionary."""
        return cls(
            default_service_name=data.get("default_service_name"),
            default_slot=data.get("default_slot", "Production"),
            snapshot_path=data.get("snapshot_path"),
            output_format=data.get("output_format", "table"),
        )

    def validate(self) -> None:
        """Check enumerated values.

        Raises:
            ConfigError: If slot or output format is not recognised
        """
        if self.default_slot.lower() not in (s.lower() for s in DEPLOYMENT_SLOTS):
            raise ConfigError(
                f"Invalid default_slot '{self.default_slot}' "
                f"(expected one of: {', '.join(DEPLOYMENT_SLOTS)})"
            )
        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigError(
                f"Invalid output_format '{self.output_format}' "
                f"(expected one of: {', '.join(OUTPUT_FORMATS)})"
            )


class ConfigManager:
    """Manage azsm configuration file.

    Configuration is stored at ~/.azsm/config.toml with secure permissions.
    """

    DEFAULT_CONFIG_DIR = Path.home() / ".azsm"

    @classmethod
    def _default_config_file(cls) -> Path:
        return cls.DEFAULT_CONFIG_DIR / "config.toml"

    @classmethod
    def _validate_config_path(cls, path: Path) -> Path:
        """Validate configuration file path for security.

        Args:
            path: Path to validate

        Returns:
            Validated, resolved path

        Raises:
            ConfigError: If path is outside allowed directories
        """
        resolved_path = path.resolve()

        # ~/.azsm, the working directory, or the temp dir (pytest tmp_path)
        allowed_dirs = [
            cls.DEFAULT_CONFIG_DIR.resolve(),
            Path.cwd().resolve(),
            Path(tempfile.gettempdir()).resolve(),
        ]

        for allowed_dir in allowed_dirs:
            try:
                resolved_path.relative_to(allowed_dir)
                return resolved_path
            except ValueError:
                continue

        raise ConfigError(
            f"Config path outside allowed directories: {resolved_path}\n"
            f"Allowed directories:\n"
            f"  - {cls.DEFAULT_CONFIG_DIR}\n"
            f"  - {Path.cwd()}\n"
            "This restriction prevents path traversal attacks."
        )

    @classmethod
    def get_config_path(cls, custom_path: str | None = None) -> Path:
        """Get configuration file path.

        Args:
            custom_path: Custom config file path (optional)

        Returns:
            Path to config file

        Raises:
            ConfigError: If path is invalid or outside allowed directories
        """
        if custom_path:
            path = Path(custom_path).expanduser().resolve()
            path = cls._validate_config_path(path)
            if not path.exists():
                raise ConfigError(f"Config file not found: {path}")
            return path

        return cls._default_config_file()

    @classmethod
    def ensure_config_dir(cls) -> Path:
        """Ensure config directory exists with secure permissions.

        Raises:
            ConfigError: If directory creation fails
        """
        try:
            cls.DEFAULT_CONFIG_DIR.mkdir(parents=True, exist_ok=True)
            os.chmod(cls.DEFAULT_CONFIG_DIR, 0o700)
            logger.debug(f"Config directory ready: {cls.DEFAULT_CONFIG_DIR}")
            return cls.DEFAULT_CONFIG_DIR

        except Exception as e:
            raise ConfigError(f"Failed to create config directory: {e}") from e

    @classmethod
    def load_config(cls, custom_path: str | None = None) -> AzsmConfig:
        """Load configuration from file.

        Missing files yield the default configuration.

        Raises:
            ConfigError: If loading fails
        """
        config_path = cls.get_config_path(custom_path)

        if not config_path.exists():
            logger.debug("Config file not found, using defaults")
            return AzsmConfig()

        try:
            mode = config_path.stat().st_mode & 0o777
            if mode & 0o077:
                logger.warning(
                    f"Config file has insecure permissions: {oct(mode)}. Fixing to 0600..."
                )
                os.chmod(config_path, 0o600)

            with open(config_path, "rb") as f:
                data = tomli.load(f)

            logger.debug(f"Loaded config from: {config_path}")
            config = AzsmConfig.from_dict(data)

        except Exception as e:
            raise ConfigError(f"Failed to load config: {e}") from e

        config.validate()
        return config

    @classmethod
    def save_config(cls, config: AzsmConfig, custom_path: str | None = None) -> None:
        """Save configuration to file.

        Raises:
            ConfigError: If saving fails or path is outside allowed directories
        """
        config.validate()
        temp_path: Path | None = None
        try:
            if custom_path:
                config_path = Path(custom_path).expanduser().resolve()
                config_path = cls._validate_config_path(config_path)
                config_path.parent.mkdir(parents=True, exist_ok=True)
            else:
                cls.ensure_config_dir()
                config_path = cls._default_config_file()

            # tomlkit keeps comments of an existing file; write via temp file + rename
            temp_path = config_path.with_suffix(".tmp")

            if config_path.exists():
                with open(config_path) as f:
                    doc = tomlkit.load(f)
            else:
                doc = tomlkit.document()

            for key, value in config.to_dict().items():
                doc[key] = value

            with open(temp_path, "w") as f:
                tomlkit.dump(doc, f)

            os.chmod(temp_path, 0o600)
            temp_path.replace(config_path)

            logger.debug(f"Saved config to: {config_path}")

        except Exception as e:
            if temp_path and temp_path.exists():
                temp_path.unlink()
            raise ConfigError(f"Failed to save config: {e}") from e

    @classmethod
    def update_config(cls, custom_path: str | None = None, **updates: Any) -> AzsmConfig:
        """Update configuration values.

        Raises:
            ConfigError: If a key is unknown or the update fails
        """
        config = cls.load_config(custom_path)

        for key, value in updates.items():
            if not hasattr(config, key):
                raise ConfigError(f"Unknown config key: {key}")
            setattr(config, key, value)

        cls.save_config(config, custom_path)
        return config

    @classmethod
    def get_service_name(
        cls, cli_value: str | None = None, custom_path: str | None = None
    ) -> str | None:
        """Get hosted service name with CLI override."""
        if cli_value:
            return cli_value
        return cls.load_config(custom_path).default_service_name

    @classmethod
    def get_slot(cls, cli_value: str | None = None, custom_path: str | None = None) -> str:
        """Get deployment slot with CLI override (defaults to Production)."""
        if cli_value:
            return cli_value
        return cls.load_config(custom_path).default_slot

    @classmethod
    def get_snapshot_path(
        cls, cli_value: str | None = None, custom_path: str | None = None
    ) -> str | None:
        if cli_value:
            return cli_value
        return cls.load_config(custom_path).snapshot_path

    @classmethod
    def get_output_format(cls, cli_value: str | None = None, custom_path: str | None = None) -> str:
        if cli_value:
            return cli_value
        return cls.load_config(custom_path).output_format
