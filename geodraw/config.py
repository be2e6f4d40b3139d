"""Editor configuration dataclasses and YAML serialization.

The editor is usable without any configuration; the defaults reproduce the
limits the map UI ships with. A YAML file can override them:

    history_size: 50
    validation:
      min_longitude: -180.0
      max_longitude: 180.0
      min_latitude: -90.0
      max_latitude: 90.0
      min_area_m2: 1.0
      max_area_m2: 10000000000.0

Unknown keys are rejected so that typos do not silently fall back to defaults.
"""

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml
from loguru import logger

from geodraw.common.errors import ConfigError, raise_fatal_with_remedy

MAX_HISTORY_SIZE = 50
"""Default depth of each undo/redo stack."""

MIN_POLYGON_AREA_M2 = 1.0
MAX_POLYGON_AREA_M2 = 10_000_000_000.0  # 10,000 km²


@dataclass(frozen=True)
class ValidationLimits:
    """Coordinate and area bounds applied by the geometry validator."""

    min_longitude: float = -180.0
    max_longitude: float = 180.0
    min_latitude: float = -90.0
    max_latitude: float = 90.0
    min_area_m2: float = MIN_POLYGON_AREA_M2
    max_area_m2: float = MAX_POLYGON_AREA_M2

    def __post_init__(self):
        """Reject inverted or negative ranges."""
        if self.min_longitude > self.max_longitude:
            raise_fatal_with_remedy(
                f"Longitude range is inverted: {self.min_longitude} > {self.max_longitude}",
                "Swap min_longitude and max_longitude",
                ConfigError,
            )
        if self.min_latitude > self.max_latitude:
            raise_fatal_with_remedy(
                f"Latitude range is inverted: {self.min_latitude} > {self.max_latitude}",
                "Swap min_latitude and max_latitude",
                ConfigError,
            )
        if self.min_area_m2 < 0:
            raise_fatal_with_remedy(
                f"Minimum polygon area mustn't be negative, got {self.min_area_m2}",
                "Use 0 to disable the lower area bound",
                ConfigError,
            )
        if self.min_area_m2 > self.max_area_m2:
            raise_fatal_with_remedy(
                f"Area range is inverted: {self.min_area_m2} > {self.max_area_m2}",
                "Swap min_area_m2 and max_area_m2",
                ConfigError,
            )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ValidationLimits":
        """Create limits from a dict, rejecting unknown keys."""
        _reject_unknown_keys(cls, data, "validation")
        try:
            values = {key: float(value) for key, value in data.items()}
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Validation limits must be numbers: {e}") from e
        return cls(**values)


@dataclass(frozen=True)
class EditorConfig:
    """Top-level configuration for a draw session."""

    validation: ValidationLimits = field(default_factory=ValidationLimits)
    history_size: int = MAX_HISTORY_SIZE

    def __post_init__(self):
        """Validate the history depth."""
        if self.history_size < 1:
            raise_fatal_with_remedy(
                f"History size must be at least 1, got {self.history_size}",
                "Set history_size to a positive integer (default 50)",
                ConfigError,
            )

    def to_dict(self) -> dict[str, Any]:
        """Convert to a YAML-serializable dict."""
        return {"history_size": self.history_size, "validation": asdict(self.validation)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EditorConfig":
        """Create an EditorConfig from a dict (e.g., loaded YAML)."""
        _reject_unknown_keys(cls, data, "editor config")
        validation = ValidationLimits.from_dict(data.get("validation") or {})
        history_size = data.get("history_size", MAX_HISTORY_SIZE)
        if isinstance(history_size, bool) or not isinstance(history_size, int):
            raise_fatal_with_remedy(
                f"history_size must be an integer, got {history_size!r}",
                "Set history_size to a positive integer (default 50)",
                ConfigError,
            )
        return cls(validation=validation, history_size=history_size)


def _reject_unknown_keys(cls: type, data: dict[str, Any], section: str) -> None:
    if not isinstance(data, dict):
        raise_fatal_with_remedy(
            f"The {section} section must be a mapping, got {type(data).__name__}",
            "Check the YAML indentation of the section",
            ConfigError,
        )
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise_fatal_with_remedy(
            f"Unknown {section} keys: {', '.join(unknown)}",
            f"Use only: {', '.join(sorted(known))}",
            ConfigError,
        )


# ============================================================================
# YAML Loader & Saver
# ============================================================================


def load_editor_config(yaml_file: str | Path) -> EditorConfig:
    """Load editor configuration from a YAML file.

    Args:
        yaml_file: Path to YAML file

    Returns:
        EditorConfig (defaults when the file is empty)

    Raises:
        FileNotFoundError: If file doesn't exist
        yaml.YAMLError: If YAML parsing fails
        ConfigError: If schema validation fails
    """
    path = Path(yaml_file)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {yaml_file}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse YAML: {e}")
        raise

    if not data:
        logger.warning(f"Empty config file: {yaml_file}, using defaults")
        return EditorConfig()

    config = EditorConfig.from_dict(data)
    logger.info(f"Loaded editor config from {yaml_file}: history_size={config.history_size}")
    return config


def save_editor_config(config: EditorConfig, yaml_file: str | Path) -> None:
    """Save editor configuration to YAML with sorted keys.

    Raises:
        OSError: If write fails
    """
    path = Path(yaml_file)
    path.parent.mkdir(parents=True, exist_ok=True)

    try:
        with open(path, "w") as f:
            yaml.safe_dump(config.to_dict(), f, default_flow_style=False, sort_keys=True)
        logger.info(f"Saved editor config to {yaml_file}")
    except OSError as e:
        logger.error(f"Failed to save YAML: {e}")
        raise
