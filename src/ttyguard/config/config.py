"""Configuration management for ttyguard."""

from __future__ import annotations

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, Final

from ttyguard.config.file_ops import ensure_file_with_template, write_text_file
from ttyguard.config.paths import default_config_path
from ttyguard.features.streams.domain.models import DEFAULT_TRUNCATION_LIMIT
from ttyguard.platform.logging import logger

TRUNCATION_LIMIT_DEFAULT: Final[int] = DEFAULT_TRUNCATION_LIMIT
COPY_CHUNK_SIZE_DEFAULT: Final[int] = 64 * 1024


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion."""
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Log file path; console-only logging when unset
    log_file: Path | None = _path_field()

    # Bytes shown on an interactive terminal before output is truncated
    truncation_limit: int = TRUNCATION_LIMIT_DEFAULT

    # Read size used when copying input to output
    copy_chunk_size: int = COPY_CHUNK_SIZE_DEFAULT

    _instance: ClassVar[Config | None] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

    def save(self, target: Path | None = None) -> Path:
        """Save configuration to file, overwriting any existing content."""

        destination = target or default_config_path()
        try:
            write_text_file(destination, self.render_toml())
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        logger.info("Configuration saved to %s", destination)
        return destination

    def save_if_missing(self, target: Path | None = None) -> bool:
        """Write the configuration only when no file exists yet.

        Returns:
            bool: ``True`` when the file was created.
        """

        destination = target or default_config_path()
        created = ensure_file_with_template(destination, template_provider=self.render_toml)
        if created:
            logger.info("Created default configuration at %s", destination)
        else:
            logger.info("Configuration already exists at %s", destination)
        return created

    def render_toml(self) -> str:
        """Render configuration as TOML with inline guidance."""

        config = asdict(self)
        lines: list[str] = []

        lines.append("# ttyguard configuration file")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/ttyguard.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Bytes shown on an interactive terminal before truncating (default 1600)")
        lines.append(
            f"truncation_limit = {self._format_toml_value(config['truncation_limit'])}"
        )
        lines.append("")

        lines.append("# Read size in bytes when copying input to output (default 65536)")
        lines.append(
            f"copy_chunk_size = {self._format_toml_value(config['copy_chunk_size'])}"
        )
        lines.append("")

        return "\n".join(lines)

    @staticmethod
    def _format_toml_value(value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            return f'"{str(value)}"'
        return str(value)

    @classmethod
    def load(cls, config_file: Path | None = None) -> Config:
        """Load configuration from file, falling back to defaults when it is absent.

        Args:
            config_file: Explicit file to read. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object, cached for later calls.
        """
        if cls._instance is not None and config_file in (None, cls._loaded_from):
            return cls._instance

        source = config_file or default_config_path()

        if not source.exists():
            instance = cls()
        else:
            try:
                with open(source, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.error("Failed to load configuration: %s", e)
                raise

            known = {f.name for f in fields(cls)}
            unknown = sorted(set(config_dict) - known)
            if unknown:
                logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))

            instance = cls(**{key: value for key, value in config_dict.items() if key in known})
            logger.debug("Configuration loaded from %s", source)

        cls._instance = instance
        cls._loaded_from = source
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance so the next ``load`` rereads the file."""

        cls._instance = None
        cls._loaded_from = None


__all__ = ["COPY_CHUNK_SIZE_DEFAULT", "Config", "TRUNCATION_LIMIT_DEFAULT"]
