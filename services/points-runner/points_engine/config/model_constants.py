"""
Projection Constants Configuration

This module loads the projection profiles from the YAML file shipped next to it
(or from the file named by the POINTS_ENGINE_CONFIG environment variable).
It is the SINGLE SOURCE OF TRUTH for weights, baselines and caps in Python.

WARNING: DO NOT hardcode weights in other files. Always import from here.

Usage:
    from points_engine.config.model_constants import get_profile

    constants = get_profile()                    # default profile
    conservative = get_profile("nba_conservative")
"""

import dataclasses
import logging
import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "POINTS_ENGINE_CONFIG"
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "projection_profiles.yaml"

# Tolerated drift of the base blend away from 1.0 before a warning is logged
BASE_BLEND_TOLERANCE = 0.05


def _resolve_config_path(path: Optional[Union[str, Path]] = None) -> Path:
    if path is not None:
        return Path(path)
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return DEFAULT_CONFIG_PATH


def _load_yaml_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """Load configuration from the profiles YAML file."""
    yaml_path = _resolve_config_path(path)

    if not yaml_path.exists():
        raise FileNotFoundError(
            f"Configuration file not found: {yaml_path}\n"
            f"Set {CONFIG_ENV_VAR} or pass an explicit path."
        )

    with open(yaml_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f)


@dataclass(frozen=True)
class ProjectionConstants:
    """One calibration profile: blend weights, multiplier weights, baselines, caps."""
    name: str

    # Base blend (should sum to ~1.0)
    w_base_line: float
    w_base_season_avg: float

    # Multiplier weights
    w_home_away: float
    w_game_total: float
    w_team_total: float
    w_def_vs_pos: float
    w_recent_form: float
    w_minutes_trend: float
    w_pace: float
    w_b2b_penalty: float  # flat reduction, not proportional

    # League baselines
    league_avg_game_total: float
    league_avg_team_total: float
    league_avg_pace: float
    league_base_pts_allowed_pos: float

    # Caps on the combined multiplier
    mult_min: float
    mult_max: float

    description: str = ""

    def replace(self, **changes: Any) -> 'ProjectionConstants':
        """Return a copy with some constants changed (the original is untouched)."""
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)


@dataclass(frozen=True)
class SignalConfig:
    """Over/under lean parameters."""
    edge_threshold: float


@dataclass(frozen=True)
class ProjectionConfig:
    """Complete projection configuration."""
    version: str
    last_updated: str
    default_profile: str
    signal: SignalConfig
    profiles: Dict[str, ProjectionConstants]


def _build_constants(name: str, raw: Dict[str, Any]) -> ProjectionConstants:
    """Build one typed profile from its raw YAML dict."""
    return ProjectionConstants(
        name=name,
        description=raw.get('description', ''),
        w_base_line=float(raw['base_blend']['line']),
        w_base_season_avg=float(raw['base_blend']['season_avg']),
        w_home_away=float(raw['weights']['home_away']),
        w_game_total=float(raw['weights']['game_total']),
        w_team_total=float(raw['weights']['team_total']),
        w_def_vs_pos=float(raw['weights']['def_vs_pos']),
        w_recent_form=float(raw['weights']['recent_form']),
        w_minutes_trend=float(raw['weights']['minutes_trend']),
        w_pace=float(raw['weights']['pace']),
        w_b2b_penalty=float(raw['weights']['b2b_penalty']),
        league_avg_game_total=float(raw['baselines']['game_total']),
        league_avg_team_total=float(raw['baselines']['team_total']),
        league_avg_pace=float(raw['baselines']['pace']),
        league_base_pts_allowed_pos=float(raw['baselines']['pts_allowed_pos']),
        mult_min=float(raw['caps']['min']),
        mult_max=float(raw['caps']['max']),
    )


def _build_config(raw_config: Dict[str, Any]) -> ProjectionConfig:
    """Build typed configuration from raw YAML dict."""
    profiles = {
        name: _build_constants(name, raw_profile)
        for name, raw_profile in raw_config['profiles'].items()
    }
    default_profile = raw_config['default_profile']
    if default_profile not in profiles:
        raise KeyError(f"default_profile '{default_profile}' is not a defined profile")

    return ProjectionConfig(
        version=str(raw_config['version']),
        last_updated=str(raw_config['last_updated']),
        default_profile=default_profile,
        signal=SignalConfig(
            edge_threshold=float(raw_config['signal']['edge_threshold'])
        ),
        profiles=profiles,
    )


# =============================================================================
# VALIDATION
# =============================================================================

def validate_constants(constants: ProjectionConstants) -> None:
    """
    Validate one profile.

    Zero or negative baselines are accepted: the engine neutralises the
    matching factor instead of dividing by them.

    Raises:
        ValueError: If any constant is invalid
    """
    errors = []

    for field in dataclasses.fields(constants):
        value = getattr(constants, field.name)
        if isinstance(value, float) and not math.isfinite(value):
            errors.append(f"{constants.name}.{field.name} must be finite")

    if constants.mult_min > constants.mult_max:
        errors.append(
            f"{constants.name}: mult_min ({constants.mult_min}) must not exceed "
            f"mult_max ({constants.mult_max})"
        )

    if errors:
        raise ValueError("Configuration validation failed:\n" + "\n".join(errors))

    blend = constants.w_base_line + constants.w_base_season_avg
    if abs(blend - 1.0) > BASE_BLEND_TOLERANCE:
        logger.warning(f"Profile {constants.name}: base blend weights sum to {blend:.2f}, expected ~1.0")


def validate_config(config: ProjectionConfig) -> None:
    """Validate every profile and the signal block."""
    for constants in config.profiles.values():
        validate_constants(constants)

    if config.signal.edge_threshold < 0:
        raise ValueError("signal.edge_threshold must be non-negative")


def load_config(path: Optional[Union[str, Path]] = None) -> ProjectionConfig:
    """Load, build and validate a configuration file."""
    config = _build_config(_load_yaml_config(path))
    validate_config(config)
    return config


# =============================================================================
# GLOBAL CONFIGURATION INSTANCE
# =============================================================================

# Load configuration at module import time
# This ensures any YAML syntax errors are caught immediately
PROJECTION_CONFIG: ProjectionConfig = load_config()


def load_profiles(path: Optional[Union[str, Path]] = None) -> Dict[str, ProjectionConstants]:
    """Return every profile, from `path` or from the loaded configuration."""
    if path is None:
        return dict(PROJECTION_CONFIG.profiles)
    return dict(load_config(path).profiles)


def get_profile(name: Optional[str] = None) -> ProjectionConstants:
    """
    Get a profile by name (default profile when name is None).

    Raises:
        KeyError: If the profile does not exist
    """
    profile_name = name or PROJECTION_CONFIG.default_profile
    try:
        return PROJECTION_CONFIG.profiles[profile_name]
    except KeyError:
        available = ", ".join(sorted(PROJECTION_CONFIG.profiles))
        raise KeyError(f"Unknown profile '{profile_name}' (available: {available})") from None


def get_constant(path: str) -> Any:
    """
    Get a configuration value by dot-notation path.

    Example:
        >>> get_constant('profiles.nba_default.mult_max')
        1.4
    """
    keys = path.split('.')
    value: Any = PROJECTION_CONFIG

    for key in keys:
        if isinstance(value, dict):
            value = value[key]
        else:
            value = getattr(value, key)

    return value


def reload_config(path: Optional[Union[str, Path]] = None) -> ProjectionConfig:
    """
    Reload configuration from YAML file.

    Useful for testing or when calibration changes at runtime.
    """
    global PROJECTION_CONFIG
    PROJECTION_CONFIG = load_config(path)
    return PROJECTION_CONFIG
