import logging
import os
import threading
import tomllib
from enum import StrEnum
from pathlib import Path

logger = logging.getLogger(__name__)

# Environment variable naming the TOML settings file
SETTINGS_ENV = 'LEB128CODEC_SETTINGS'

# Settings key constants
SETTING_DECODE_OVERFLOW = 'decode.overflow'
SETTING_POOL_MAX_SIZE = 'pool.max_size'

DEFAULT_POOL_MAX_SIZE = 16


class OverflowPolicy(StrEnum):
    """What the unsigned decoder does with payload bits beyond 64."""
    ERROR = 'error'
    TRUNCATE = 'truncate'


class CodecSettings:
    """Settings manager for codec configuration.

    Provides a read-only key-value interface over a TOML document. If no file is
    given, or the file does not exist, an empty settings dictionary is used and
    every lookup returns its default.

    Example:
        settings = CodecSettings(Path('leb128codec.toml'))
        policy = settings.overflow_policy
        max_size = settings.get('pool.max_size', 16)
    """

    def __init__(self, path: Path | None = None):
        """Initialize settings from a TOML file.

        Args:
            path: Path to the settings file, or None for all defaults
        """
        self._path = path
        self._settings = {}

        if path is not None and path.exists():
            with open(path, 'rb') as f:
                self._settings = tomllib.load(f)
            logger.debug("Loaded codec settings from %s", path)

        # Invalid values raise here, never from a codec call
        self._overflow_policy = self._parse_overflow_policy()
        self._pool_max_size = self._parse_pool_max_size()

    @classmethod
    def from_environment(cls) -> 'CodecSettings':
        """Load settings from the file named by LEB128CODEC_SETTINGS, if set."""
        path = os.environ.get(SETTINGS_ENV)
        return cls(Path(path) if path else None)

    @property
    def path(self) -> Path | None:
        return self._path

    def get(self, key: str, default=None):
        """Get a setting value by key with optional default.

        Supports dot notation for nested keys (e.g. 'decode.overflow' accesses
        settings['decode']['overflow']). Returns the default value if the key path
        does not exist or if any intermediate value is not a dictionary.

        Examples:
            >>> settings.get(SETTING_DECODE_OVERFLOW, 'error')
            'truncate'
            >>> settings.get('nonexistent.key', 'fallback')
            'fallback'
        """
        keys = key.split('.')
        value = self._settings

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    @property
    def overflow_policy(self) -> OverflowPolicy:
        return self._overflow_policy

    @property
    def pool_max_size(self) -> int:
        return self._pool_max_size

    def _parse_overflow_policy(self) -> OverflowPolicy:
        value = self.get(SETTING_DECODE_OVERFLOW, OverflowPolicy.ERROR)
        try:
            return OverflowPolicy(value)
        except ValueError:
            raise ValueError(
                f"Invalid {SETTING_DECODE_OVERFLOW} setting: {value!r} "
                f"(expected one of {', '.join(p.value for p in OverflowPolicy)})") from None

    def _parse_pool_max_size(self) -> int:
        value = self.get(SETTING_POOL_MAX_SIZE, DEFAULT_POOL_MAX_SIZE)
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ValueError(f"Invalid {SETTING_POOL_MAX_SIZE} setting: {value!r} (expected a non-negative integer)")
        return value


# Loaded at import; a bad settings file surfaces when the package is imported
_settings: CodecSettings = CodecSettings.from_environment()
_settings_lock = threading.Lock()


def get_settings() -> CodecSettings:
    """Return the process-wide settings."""
    with _settings_lock:
        return _settings


def reload_settings() -> CodecSettings:
    """Reread the settings file and discard the shared scratch pool built from the old settings.

    Raises:
        ValueError: If the file holds an invalid value. The current settings
            stay in effect.
    """
    global _settings
    from .utils.scratch import reset_pool

    settings = CodecSettings.from_environment()
    with _settings_lock:
        _settings = settings
    reset_pool()
    return settings
