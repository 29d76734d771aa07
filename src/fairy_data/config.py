"""Configuration models and the YAML configuration loader.

Configuration is immutable once built: producers receive it at construction
time and derive new producers instead of mutating shared settings.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from fairy_data.errors import ConfigError


class TextConfig(BaseModel):
    """Settings for text producers."""

    model_config = ConfigDict(frozen=True)

    limit: int = Field(
        default=0,
        ge=0,
        description="Maximum length of produced text (0 for unlimited)"
    )


class DateConfig(BaseModel):
    """Year window used when drawing random date-times."""

    model_config = ConfigDict(frozen=True)

    year_low: int = Field(default=2000, ge=1, le=9998, description="First year of the window (inclusive)")
    year_high: int = Field(default=2100, ge=2, le=9999, description="End year of the window (exclusive)")

    @model_validator(mode="after")
    def _check_window(self) -> "DateConfig":
        if self.year_low >= self.year_high:
            raise ValueError(
                f"year_low ({self.year_low}) must be lower than year_high ({self.year_high})"
            )
        return self


class FairyConfig(BaseModel):
    """Top-level configuration for a Fairy instance."""

    model_config = ConfigDict(frozen=True)

    seed: int | None = Field(default=None, description="Random seed for reproducible data")
    locale: str = Field(default="en_US", description="Faker locale used for words")
    text: TextConfig = Field(default_factory=TextConfig, description="Text producer settings")
    dates: DateConfig = Field(default_factory=DateConfig, description="Date producer settings")


class ConfigLoader:
    """Loads and saves FairyConfig as YAML."""

    def load_file(self, path: Path | str) -> FairyConfig:
        """Load a configuration from a YAML file.

        Args:
            path: Path to the YAML file

        Returns:
            Loaded FairyConfig instance
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        return self._parse_config(data)

    def load_from_string(self, content: str) -> FairyConfig:
        """Load a configuration from a YAML string."""
        data = yaml.safe_load(content)
        return self._parse_config(data)

    def _parse_config(self, data: Any) -> FairyConfig:
        if data is None:
            return FairyConfig()
        if not isinstance(data, dict):
            raise ConfigError(f"Config must be a mapping, got {type(data).__name__}")

        try:
            return FairyConfig(
                seed=data.get("seed"),
                locale=data.get("locale", "en_US"),
                text=TextConfig(**(data.get("text") or {})),
                dates=DateConfig(**(data.get("dates") or {})),
            )
        except (ValidationError, TypeError) as e:
            raise ConfigError(f"Invalid config: {e}") from e

    def save_file(self, config: FairyConfig, path: Path | str) -> None:
        """Save a configuration to a YAML file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            yaml.dump(self.to_dict(config), f, default_flow_style=False, sort_keys=False)

    def to_dict(self, config: FairyConfig) -> dict[str, Any]:
        """Convert a FairyConfig to a plain dictionary for YAML serialization."""
        return {
            "seed": config.seed,
            "locale": config.locale,
            "text": {"limit": config.text.limit},
            "dates": {
                "year_low": config.dates.year_low,
                "year_high": config.dates.year_high,
            },
        }


def load_config(path: Path | str) -> FairyConfig:
    """Convenience function to load a configuration from a file."""
    loader = ConfigLoader()
    return loader.load_file(path)
