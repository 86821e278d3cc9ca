"""
Centralized configuration management.

Configuration is loaded from:
1. Environment variables
2. .env file (if present)
3. Default values

Search tuning lives in SearchConfig and is NOT read from the environment:
the threshold, distance window, minimum match length and field weights are
fixed values that every list screen shares.

Usage:
    from voterlookup.config import get_config, SearchConfig
    config = get_config()
    print(config.debug)  # True if DEBUG=1 in environment
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional

from .exceptions import ConfigurationError


def _load_dotenv(dotenv_path: Optional[Path] = None) -> None:
    """
    Minimal .env loader.

    Supports KEY=VALUE, ignores blank lines and comments (#).
    Does not override existing environment variables.
    """
    if dotenv_path is None:
        dotenv_path = Path(__file__).resolve().parent.parent / ".env"

    if not dotenv_path.exists() or not dotenv_path.is_file():
        return

    for raw_line in dotenv_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if not key:
            continue
        if os.getenv(key) in (None, ""):
            os.environ[key] = value


# Load .env on module import
_load_dotenv()


def _get_bool_env(key: str, default: bool = False) -> bool:
    """Get boolean from environment variable."""
    value = os.getenv(key, "").strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off"):
        return False
    return default


# Field weights used by every fuzzy-search screen. Primary identity fields
# (native name, serial number) weigh most, guardian and house number least.
DEFAULT_FIELD_WEIGHTS: Mapping[str, float] = MappingProxyType({
    "name": 2.0,
    "manglish_name": 1.5,
    "sl_no_str": 2.0,
    "id_card_no": 1.5,
    "house_name": 1.0,
    "manglish_house": 1.0,
    "guardian_name": 0.8,
    "manglish_guardian": 0.8,
    "house_no": 0.8,
})


@dataclass(frozen=True)
class SearchConfig:
    """
    Fuzzy search tuning.

    threshold is a per-field score cutoff in [0, 1] where 0 is an exact
    match; 0.25 sits in the strict half of the range to keep loosely related
    names out of the results. distance only matters when ignore_location is
    off, in which case a match found N characters into a field is penalised
    by N / distance.
    """
    threshold: float = 0.25
    distance: int = 100
    min_match_char_length: int = 2
    ignore_location: bool = True
    include_score: bool = True
    field_weights: Mapping[str, float] = field(default_factory=lambda: DEFAULT_FIELD_WEIGHTS)

    def __post_init__(self):
        if not 0.0 <= self.threshold <= 1.0:
            raise ConfigurationError(
                f"threshold must be between 0 and 1, got {self.threshold}",
                config_key="threshold",
            )
        if self.distance < 0:
            raise ConfigurationError(
                f"distance must not be negative, got {self.distance}",
                config_key="distance",
            )
        if self.min_match_char_length < 1:
            raise ConfigurationError(
                f"min_match_char_length must be at least 1, got {self.min_match_char_length}",
                config_key="min_match_char_length",
            )
        if not self.field_weights:
            raise ConfigurationError("field_weights must name at least one field", config_key="field_weights")
        for name, weight in self.field_weights.items():
            if weight <= 0:
                raise ConfigurationError(
                    f"weight for '{name}' must be positive, got {weight}",
                    config_key="field_weights",
                )
        # Freeze caller-supplied dicts so a built index cannot drift
        object.__setattr__(self, "field_weights", MappingProxyType(dict(self.field_weights)))

    @property
    def fields(self) -> tuple[str, ...]:
        return tuple(self.field_weights.keys())

    @property
    def normalized_weights(self) -> dict[str, float]:
        """Weights scaled to sum to 1."""
        total = sum(self.field_weights.values())
        return {name: weight / total for name, weight in self.field_weights.items()}

    def to_dict(self) -> dict:
        return {
            "threshold": self.threshold,
            "distance": self.distance,
            "min_match_char_length": self.min_match_char_length,
            "ignore_location": self.ignore_location,
            "include_score": self.include_score,
            "field_weights": dict(self.field_weights),
        }


@dataclass
class Config:
    """
    Main application configuration.

    All settings are loaded from environment variables with sensible defaults.
    Set DEBUG=1 in environment to enable debug mode.
    """

    # Base directory (project root)
    base_dir: Path = field(default_factory=lambda: Path(__file__).resolve().parent.parent)

    # Directory paths
    data_dir: Path = field(default=None)
    logs_dir: Path = field(default=None)

    # Debug mode (enables verbose logging)
    debug: bool = field(default_factory=lambda: _get_bool_env("DEBUG", False))

    # Write a log file per run in addition to console output
    log_to_file: bool = field(default_factory=lambda: _get_bool_env("LOG_TO_FILE", False))

    # Voter source used by the CLI and viewer when none is given (JSON or CSV)
    default_source: str = field(default_factory=lambda: os.getenv("DEFAULT_SOURCE", ""))

    search: SearchConfig = field(default_factory=SearchConfig)

    def __post_init__(self):
        """Resolve paths after initialization."""
        if self.data_dir is None:
            self.data_dir = self.base_dir / os.getenv("DATA_DIR", "data")
        if self.logs_dir is None:
            self.logs_dir = self.base_dir / os.getenv("LOG_DIR", "logs")

    @property
    def default_source_path(self) -> Optional[Path]:
        """Resolve DEFAULT_SOURCE relative to the data directory."""
        if not self.default_source:
            return None
        path = Path(self.default_source)
        if not path.is_absolute():
            path = self.data_dir / path
        return path


# Global config instance (lazily initialized)
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config() -> None:
    """Reset the global configuration (useful for testing)."""
    global _config
    _config = None
