"""Configuration management for drivepath."""
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, ClassVar

from drivepath.platform.logging import logger
from drivepath.config.paths import default_config_path


@dataclass
class Config:
    """Library configuration."""

    # Compare labels, bodies and streams ignoring case
    case_insensitive_equality: bool = True

    # What to do with ".." segments above the root: "clamp" or "raise"
    parent_overflow: str = "clamp"

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    @classmethod
    def from_mapping(cls, values: dict[str, Any]) -> "Config":
        """Build a configuration from parsed TOML, ignoring unknown keys.

        Args:
            values: Top-level table read from the config file.

        Returns:
            Config: Configuration with defaults for absent keys.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
        return cls(**{key: value for key, value in values.items() if key in known})

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file.

        A missing file yields the defaults; nothing is written to disk.

        Returns:
            Config: Loaded configuration object.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)

                logger.info(
                    "Configuration loaded from %s",
                    config_file,
                    extra={"path_event": "path.config.loaded"},
                )
                instance = cls.from_mapping(config_dict)
            else:
                logger.debug("No configuration at %s, using defaults", config_file)
                instance = cls()

            cls._instance = instance
            cls._loaded_from = config_file
            return instance

        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise


# Global configuration instance
config = Config.load()
