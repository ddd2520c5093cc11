"""
midimaps Configuration

Environment-based configuration for the canonical → target map converter.
"""
import logging
from functools import lru_cache
from importlib.metadata import PackageNotFoundError, version

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _app_version_from_package() -> str:
    """Installed distribution version, or "0.0.0-unknown" from a bare checkout."""
    try:
        return version("midimaps")
    except PackageNotFoundError:
        return "0.0.0-unknown"


# Value of the ``version`` attribute on the emitted <ArdourMIDIBindings> root.
# This is the target file format version, not the canonical map version.
TARGET_FORMAT_VERSION: str = "1.0.0"

# Addressable parameter path pieces: surface anchor + selected-strip indicator.
PARAMETER_PATH_ANCHOR: str = "/route/plugin/parameter"
SELECTED_STRIP: str = "S1"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_name: str = "midimaps"
    app_version: str = _app_version_from_package()
    debug: bool = False
    log_level: str = "INFO"

    # Target serializer layout
    xml_indent: str = "  "
    xml_newline: str = "\n"

    # Fallbacks applied at conversion time when a mapping omits them
    default_midi_channel: int = 1
    default_midi_number: int = 0

    # Disabled mappings resolve to no reference; emit them as no-op bindings?
    emit_unbound_bindings: bool = False

    target_file_extension: str = ".map"

    @model_validator(mode="after")
    def _warn_non_whitespace_indent(self) -> "Settings":
        """Warn when the XML indent would inject visible characters."""
        if self.xml_indent.strip():
            logging.getLogger(__name__).warning(
                "MIDIMAPS_XML_INDENT contains non-whitespace characters (%r); "
                "rendered maps will still parse but look odd.",
                self.xml_indent,
            )
        return self

    model_config = SettingsConfigDict(
        env_prefix="MIDIMAPS_",
        env_file=".env",
        env_file_encoding="utf-8",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(config: Settings | None = None) -> None:
    """Configure root logging for command-line tooling that embeds midimaps."""
    config = config or get_settings()
    level = logging.DEBUG if config.debug else getattr(logging, config.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


# Convenience access
settings = get_settings()
