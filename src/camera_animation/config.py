"""
Configuration management for the camera animation engine.

Implements hierarchical configuration loading:
1. Defaults
2. JSON config file (explicit path or $CAMERA_ANIMATION_CONFIG)
3. Environment variables (highest priority)

Usage:
    from camera_animation.config import AnimationConfig

    config = AnimationConfig()
    fps = config.default_fps
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

CONFIG_SECTION = 'camera_animation'
CONFIG_PATH_ENV = 'CAMERA_ANIMATION_CONFIG'
ENV_PREFIX = 'CAMERA_ANIMATION_'


class AnimationConfig:
    """Engine settings with JSON and environment overrides."""

    DEFAULTS: Dict[str, Any] = {
        # Frame sequencing
        'default_fps': 30,
        'default_fov': 75.0,
        'default_style': 'educational',

        # Durations (seconds)
        'min_duration': 1.0,
        'max_duration': 600.0,
        'default_auto_duration': 60.0,
        'default_preset_duration': 30.0,

        # Keyframe derivation
        'max_focus_objects': 4,

        # Preview
        'default_preview_resolution': 30,

        # Logging and debug
        'debug_mode': False,
    }

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Optional path to a JSON config file; falls back to
                $CAMERA_ANIMATION_CONFIG when omitted
        """
        self._config: Dict[str, Any] = {}
        self._config_file = config_file or os.getenv(CONFIG_PATH_ENV)
        self._load_configuration()

    def _load_configuration(self):
        """Load configuration from all sources in priority order."""
        self._config = self.DEFAULTS.copy()
        self._load_from_json_config()
        self._load_from_environment()
        self._validate_config()

        if self.debug_mode:
            logger.info(f"camera animation configuration loaded: {len(self._config)} settings")

    def _load_from_json_config(self):
        """Load configuration from JSON config file."""
        if not self._config_file:
            return

        config_path = Path(self._config_file)
        if not config_path.exists():
            logger.debug(f"No config file found at {config_path}")
            return

        try:
            with open(config_path, 'r') as f:
                json_config = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            logger.warning(f"Failed to load JSON config from {config_path}: {e}")
            return

        # Shared config files keep engine settings under their own section
        if CONFIG_SECTION in json_config:
            json_config = json_config[CONFIG_SECTION]

        # Filter out comment keys (starting with _)
        filtered_config = {
            k: v for k, v in json_config.items()
            if not k.startswith('_')
        }
        self._config.update(filtered_config)
        logger.debug(f"Loaded JSON config from {config_path}")

    def _load_from_environment(self):
        """Load configuration from environment variables."""
        for key in self._config.keys():
            env_key = f"{ENV_PREFIX}{key.upper()}"
            env_value = os.getenv(env_key)

            if env_value is not None:
                converted_value = self._convert_env_value(env_value, self._config[key])
                self._config[key] = converted_value
                logger.debug(f"Loaded environment variable: {env_key} = {converted_value}")

    def _convert_env_value(self, env_value: str, default_value: Any) -> Any:
        """Convert environment variable string to appropriate type."""
        if isinstance(default_value, bool):
            return env_value.lower() in ('true', '1', 'yes', 'on')
        elif isinstance(default_value, int):
            try:
                return int(env_value)
            except ValueError:
                logger.warning(f"Invalid integer value in environment: {env_value}")
                return default_value
        elif isinstance(default_value, float):
            try:
                return float(env_value)
            except ValueError:
                logger.warning(f"Invalid float value in environment: {env_value}")
                return default_value
        else:
            return env_value

    def _validate_config(self):
        """Reset out-of-range values to their defaults."""
        positive_keys = (
            'default_fps',
            'default_fov',
            'default_preview_resolution',
            'min_duration',
            'max_duration',
            'default_auto_duration',
            'default_preset_duration',
            'max_focus_objects',
        )
        for key in positive_keys:
            value = self._config.get(key)
            if not isinstance(value, (int, float)) or isinstance(value, bool) or value <= 0:
                logger.warning(f"Invalid {key} {value!r}, using {self.DEFAULTS[key]}")
                self._config[key] = self.DEFAULTS[key]

        if self._config['default_fov'] >= 180:
            logger.warning(f"Invalid default_fov {self._config['default_fov']}, using 75.0")
            self._config['default_fov'] = self.DEFAULTS['default_fov']

        if self._config['min_duration'] > self._config['max_duration']:
            logger.warning("min_duration exceeds max_duration, restoring both defaults")
            self._config['min_duration'] = self.DEFAULTS['min_duration']
            self._config['max_duration'] = self.DEFAULTS['max_duration']

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        return self._config.get(key, default)

    def set(self, key: str, value: Any):
        """Set configuration value (runtime only)."""
        self._config[key] = value

    def get_all(self) -> Dict[str, Any]:
        """Get all configuration values."""
        return self._config.copy()

    def reload(self):
        """Reload configuration from all sources."""
        self._load_configuration()

    @property
    def default_fps(self) -> int:
        return int(self._config.get('default_fps', 30))

    @property
    def default_fov(self) -> float:
        return float(self._config.get('default_fov', 75.0))

    @property
    def default_style(self) -> str:
        return self._config.get('default_style', 'educational')

    @property
    def min_duration(self) -> float:
        return float(self._config.get('min_duration', 1.0))

    @property
    def max_duration(self) -> float:
        return float(self._config.get('max_duration', 600.0))

    @property
    def default_auto_duration(self) -> float:
        return float(self._config.get('default_auto_duration', 60.0))

    @property
    def default_preset_duration(self) -> float:
        return float(self._config.get('default_preset_duration', 30.0))

    @property
    def max_focus_objects(self) -> int:
        return int(self._config.get('max_focus_objects', 4))

    @property
    def default_preview_resolution(self) -> int:
        return int(self._config.get('default_preview_resolution', 30))

    @property
    def debug_mode(self) -> bool:
        return bool(self._config.get('debug_mode', False))

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}: {len(self._config)} settings>"


__all__ = ['AnimationConfig', 'CONFIG_PATH_ENV', 'ENV_PREFIX']
