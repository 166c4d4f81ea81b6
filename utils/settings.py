"""
Runtime settings for the Zoro scraper API.

Values are resolved in this order (later wins):

1. built-in defaults
2. ``config.py`` at the project root (copy ``config.example.py``), if present
3. environment variables, either ``NAME`` or ``VAR_NAME``

Usage::

    from utils.settings import load_settings

    settings = load_settings()
    print(settings.zoro_base_url, settings.request_timeout)
"""

import os
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Tuple

logger = logging.getLogger(__name__)

# Placeholder values that represent "empty"
EMPTY_PLACEHOLDERS = ('__EMPTY__', '__NULL__', 'null', 'none', 'NULL', 'NONE')


# =============================================================================
# Environment Variable Helpers
# =============================================================================

def get_env(name: str, default: str = '') -> str:
    """Get environment variable with default value.

    Supports the ``VAR_`` prefix (checked first).  ``__EMPTY__`` / ``__NULL__``
    stand for an empty string.
    """
    val = os.environ.get(f'VAR_{name}', None)
    if val is None:
        val = os.environ.get(name, default)

    if val in EMPTY_PLACEHOLDERS:
        return ''
    return val or default


def get_env_int(name: str, default: int) -> int:
    """Get environment variable as integer, *default* when unset or invalid."""
    val = get_env(name, str(default))
    if val in EMPTY_PLACEHOLDERS or val == '':
        return default
    try:
        return int(val)
    except (ValueError, TypeError):
        logger.warning('Ignoring non-integer value for %s: %r', name, val)
        return default


def get_env_float(name: str, default: float) -> float:
    """Get environment variable as float, *default* when unset or invalid."""
    val = get_env(name, str(default))
    if val in EMPTY_PLACEHOLDERS or val == '':
        return default
    try:
        return float(val)
    except (ValueError, TypeError):
        logger.warning('Ignoring non-numeric value for %s: %r', name, val)
        return default


def get_env_bool(name: str, default: bool) -> bool:
    """Get environment variable as boolean, *default* when unset or invalid."""
    val = get_env(name, str(default)).lower()
    if val in ('true', '1', 'yes'):
        return True
    elif val in ('false', '0', 'no'):
        return False
    return default


# =============================================================================
# Settings
# =============================================================================

@dataclass(frozen=True)
class Settings:
    """Resolved configuration for one process."""
    zoro_base_url: str = 'https://zoro.to'
    request_timeout: float = 5
    api_host: str = '127.0.0.1'
    api_port: int = 8000
    log_level: str = 'INFO'
    api_log_file: str = ''
    legacy_fallback: bool = False


# (config_name, field_name, env reader)
SETTINGS_MAP: List[Tuple[str, str, Callable]] = [
    ('ZORO_BASE_URL', 'zoro_base_url', get_env),
    ('REQUEST_TIMEOUT', 'request_timeout', get_env_float),
    ('API_HOST', 'api_host', get_env),
    ('API_PORT', 'api_port', get_env_int),
    ('LOG_LEVEL', 'log_level', get_env),
    ('API_LOG_FILE', 'api_log_file', get_env),
    ('LEGACY_FALLBACK', 'legacy_fallback', get_env_bool),
]


def _load_config_module() -> Dict[str, Any]:
    """Return the upper-case names defined in ``config.py``, if it exists."""
    try:
        import config
    except ImportError:
        return {}
    return {name: getattr(config, name) for name in dir(config) if name.isupper()}


def load_settings() -> Settings:
    """Build a *Settings* from defaults, ``config.py`` and the environment."""
    defaults = Settings()
    module_values = _load_config_module()

    values = {}
    for config_name, field_name, reader in SETTINGS_MAP:
        default = module_values.get(config_name, getattr(defaults, field_name))
        values[field_name] = reader(config_name, default)

    values['zoro_base_url'] = values['zoro_base_url'].rstrip('/')
    return Settings(**values)
