"""
Solver Settings

Loads loader/solver policy from YAML: blank-line handling, empty-source
handling and text encoding.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

DEFAULT_SETTINGS_PATH = Path(__file__).resolve().parent / "solver_settings.yaml"

# Key -> accepted types
SETTING_TYPES: dict[str, tuple[type, ...]] = {
    "skip_blank_lines": (bool,),
    "allow_empty": (bool,),
    "empty_result": (int, type(None)),
    "encoding": (str,),
}


@dataclass(frozen=True)
class SolverSettings:
    """Policy knobs shared by TriangleLoader and PathSumSolver."""

    skip_blank_lines: bool = True
    allow_empty: bool = False
    empty_result: int | None = None
    encoding: str = "utf-8"

    @classmethod
    def load(cls, settings_path: str | Path | None = None) -> "SolverSettings":
        """
        Load settings from a YAML file.

        Args:
            settings_path: Path to the settings YAML file.
                           Defaults to the solver_settings.yaml bundled with the package.

        Returns:
            SolverSettings with file values overriding the defaults.
        """
        path = Path(settings_path) if settings_path is not None else DEFAULT_SETTINGS_PATH
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Settings file {path} must contain a mapping, got {type(data).__name__}")

        settings = cls.from_dict(data)
        logger.info("Loaded solver settings from %s: %s", path, settings)
        return settings

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SolverSettings":
        """Build settings from a plain dict, validating value types."""
        values: dict[str, Any] = {}
        for key, value in data.items():
            expected = SETTING_TYPES.get(key)
            if expected is None:
                logger.warning("Ignoring unknown solver setting: %s", key)
                continue
            # YAML booleans must not pass as empty_result integers
            if not isinstance(value, expected) or (key == "empty_result" and isinstance(value, bool)):
                raise ValueError(f"Setting {key!r} has invalid value {value!r}")
            values[key] = value
        return cls(**values)
