"""
Configuration Loader - YAML Loading with Validation.

Reads a YAML config file, optionally overlays a profile from the
``profiles/`` directory next to it, and validates the result into a
StreamConfig. Profile overrides and the effective dataset settings are
logged so a run can be reproduced from its log.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import yaml

from gently_down_the_stream.config.models import StreamConfig

logger = logging.getLogger(__name__)

PROFILES_DIR = "profiles"


class ConfigLoader:
    """Loads stream configuration and profiles from YAML files."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        """
        Initialize config loader.

        Args:
            base_path: Directory that relative config paths start from
        """
        self._base_path = base_path or Path(".")

    def load(
        self,
        config_path: Union[str, Path],
        profile: Optional[str] = None,
    ) -> StreamConfig:
        """
        Load configuration from a YAML file.

        Profiles are looked up as ``<config dir>/profiles/<profile>.yaml``,
        so ``config/default.yaml`` pairs with ``config/profiles/*.yaml``
        whatever the working directory is.

        Args:
            config_path: Path to YAML config file
            profile: Optional profile name to overlay

        Returns:
            Validated StreamConfig object

        Raises:
            FileNotFoundError: If config file or profile doesn't exist
            ValueError: If a file does not hold a YAML mapping
            ValidationError: If config values are invalid
        """
        path = Path(config_path)
        if not path.is_absolute():
            path = self._base_path / path

        raw = self._read_mapping(path)

        if profile:
            profile_path = path.parent / PROFILES_DIR / f"{profile}.yaml"
            if not profile_path.is_file():
                raise FileNotFoundError(
                    f"Profile '{profile}' not found at {profile_path}"
                )
            raw, overridden = _overlay(raw, self._read_mapping(profile_path))
            logger.info(
                f"Applied profile '{profile}': "
                f"{', '.join(overridden) or 'no overrides'}"
            )

        config = StreamConfig.model_validate(raw)
        datasets = config.datasets
        logger.debug(
            f"Loaded config from {path}: {len(datasets.fruits)} fruits, "
            f"{len(datasets.veggies)} veggies, {datasets.integer_count} integers "
            f"in [{datasets.integer_min}, {datasets.integer_max}], seed={datasets.seed}"
        )
        return config

    @staticmethod
    def _read_mapping(path: Path) -> Dict[str, Any]:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(
                f"{path} must contain a YAML mapping, got {type(data).__name__}"
            )
        return data


def _overlay(
    base: Dict[str, Any],
    overrides: Dict[str, Any],
    prefix: str = "",
) -> Tuple[Dict[str, Any], List[str]]:
    """Merge overrides into a copy of base; also return the dotted keys replaced."""
    merged = dict(base)
    changed: List[str] = []
    for key, value in overrides.items():
        dotted = f"{prefix}{key}"
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key], nested = _overlay(current, value, prefix=f"{dotted}.")
            changed.extend(nested)
        else:
            merged[key] = value
            changed.append(dotted)
    return merged, changed


def load_config(
    config_path: Union[str, Path],
    profile: Optional[str] = None,
) -> StreamConfig:
    """Load configuration relative to the working directory."""
    return ConfigLoader().load(config_path, profile)
