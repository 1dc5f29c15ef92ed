"""ABOUTME: Configuration loaders for static data files.
ABOUTME: Handles loading and validating the opponent presets in presets.yml."""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

from paldeaplanner.engine.models import MAX_LEVEL, MIN_LEVEL, OpponentProfile, SpeciesSnapshot
from paldeaplanner.settings import settings
from paldeaplanner.utils.type_chart import PokemonType


class OpponentPreset(BaseModel):
    """A prepared opponent: a trainer's ace with its level and Tera type."""

    label: str
    trainer: str
    species: str
    level: int = Field(ge=MIN_LEVEL, le=MAX_LEVEL)
    tera_type: PokemonType | None = None

    @field_validator("tera_type", mode="before")
    @classmethod
    def _lowercase_type(cls, value: object) -> object:
        return value.strip().lower() if isinstance(value, str) else value

    def to_profile(self, species: SpeciesSnapshot) -> OpponentProfile:
        """Build the OpponentProfile for this preset from the resolved species."""
        return OpponentProfile(species=species, level=self.level, tera_override=self.tera_type)


class PresetsConfig(BaseModel):
    """The opponent preset table."""

    presets: list[OpponentPreset]

    def get_preset(self, label: str) -> OpponentPreset:
        """Return the preset with the given label.

        Args:
            label: Label of the preset as defined in the config.

        Returns:
            The matching preset.

        Raises:
            KeyError: If no preset has that label.
        """
        for preset in self.presets:
            if preset.label == label:
                return preset
        raise KeyError(f"Preset '{label}' not found in configuration")

    def get_labels(self) -> list[str]:
        """Return the preset labels in file order."""
        return [preset.label for preset in self.presets]


def load_presets(config_path: Path | None = None) -> PresetsConfig:
    """Load the opponent presets from a YAML file.

    Args:
        config_path: Path to the presets file. Defaults to settings.presets_path.

    Returns:
        Parsed PresetsConfig object.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        pydantic.ValidationError: If the file content is invalid.
    """
    if config_path is None:
        config_path = settings.presets_path

    if not config_path.exists():
        raise FileNotFoundError(f"Presets config not found: {config_path}")

    with config_path.open(encoding="utf-8") as f:
        raw_config = yaml.safe_load(f)

    return PresetsConfig.model_validate(raw_config)
