"""ABOUTME: Configuration logic and path settings for the project.
ABOUTME: Provides config file paths and the team composer's tuning defaults."""

from pathlib import Path

from pydantic import computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

from paldeaplanner import __version__


def _get_project_root() -> Path:
    """Find project root by looking for pyproject.toml."""
    current = Path(__file__).resolve().parent
    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent
    return Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Contains settings for this project. Fields can be overridden with PALDEAPLANNER_* env vars."""

    model_config = SettingsConfigDict(env_prefix="PALDEAPLANNER_")

    VERSION: str = __version__
    """Project version."""

    PROJECT_ROOT: Path = _get_project_root()
    """Root directory of the project."""

    COMPOSER_RESOLUTION_LIMIT: int = 50
    """Maximum number of pool names resolved per composition."""

    COMPOSER_BATCH_SIZE: int = 20
    """Number of names resolved concurrently per batch by the async composer."""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def configs_dir(self) -> Path:
        """Directory containing configuration files."""
        return self.PROJECT_ROOT / "configs"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def presets_path(self) -> Path:
        """Path to the opponent presets file."""
        return self.configs_dir / "presets.yml"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def logging_config_path(self) -> Path:
        """Path to the logging configuration file."""
        return self.configs_dir / "logging.yml"


settings = Settings()
