# Config module
from .model_constants import (
    PROJECTION_CONFIG,
    ProjectionConfig,
    ProjectionConstants,
    SignalConfig,
    get_constant,
    get_profile,
    load_profiles,
    reload_config,
    validate_constants,
)

__all__ = [
    'PROJECTION_CONFIG',
    'ProjectionConfig',
    'ProjectionConstants',
    'SignalConfig',
    'get_constant',
    'get_profile',
    'load_profiles',
    'reload_config',
    'validate_constants',
]
