"""ABOUTME: Tests for the logging setup.
ABOUTME: Verifies the repository logging config is applied."""

import logging
from pathlib import Path

from paldeaplanner.logs import init_logging


class TestInitLogging:
    """Tests for init_logging function."""

    def test_default_config(self) -> None:
        """The repository config configures the package logger."""
        config = init_logging()

        assert config["version"] == 1
        assert logging.getLogger("paldeaplanner").level == logging.INFO

    def test_custom_config(self, tmp_path: Path) -> None:
        """A config file path can be supplied."""
        config_path = tmp_path / "logging.yml"
        config_path.write_text("""
version: 1
disable_existing_loggers: false
loggers:
  paldeaplanner.engine:
    level: DEBUG
""")

        init_logging(config_path)

        assert logging.getLogger("paldeaplanner.engine").level == logging.DEBUG
