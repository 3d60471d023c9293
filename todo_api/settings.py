import copy
import os

import structlog
import yaml

from todo_api.constants import CONFIG_FILE, DEFAULT_SETTINGS

logger = structlog.get_logger('settings')

# Environment variable -> (section, key, cast)
ENV_OVERRIDES = {
    "DATABASE_URL": ("database", "url", str),
    "JWT_SECRET": ("auth", "jwt_secret", str),
    "TOKEN_EXPIRES_HOURS": ("auth", "token_expires_hours", int),
    "RATELIMIT_LOGIN": ("auth", "login_rate_limit", str),
    "LOG_LEVEL": ("logging", "level", str),
    "LOG_FORMAT": ("logging", "format", str),
}

# Cache variable
_cached_settings = None


def _merge_section(merged_settings, section, values):
    if isinstance(values, dict) and isinstance(merged_settings.get(section), dict):
        merged_settings[section].update(values)
    else:
        merged_settings[section] = values


def _apply_env_overrides(settings):
    for env_name, (section, key, cast) in ENV_OVERRIDES.items():
        raw = os.environ.get(env_name)
        if raw is None or raw == "":
            continue
        try:
            settings.setdefault(section, {})[key] = cast(raw)
        except ValueError:
            logger.warning(f"Ignoring invalid value for {env_name}: {raw!r}")
    return settings


def load_settings(force=False, config_file=None):
    """
    Return application settings.

    Defaults from constants are deep merged with the optional YAML file,
    then environment variables win. The result is cached until
    ``force=True``.
    """
    global _cached_settings

    if _cached_settings and not force:
        return _cached_settings

    config_file = config_file or CONFIG_FILE
    merged_settings = copy.deepcopy(DEFAULT_SETTINGS)

    if os.path.exists(config_file):
        logger.debug(f"Reading configuration file: {config_file}")
        with open(config_file, "r") as yaml_file:
            file_settings = yaml.safe_load(yaml_file) or {}
        for section, values in file_settings.items():
            _merge_section(merged_settings, section, values)

    settings = _apply_env_overrides(merged_settings)

    _cached_settings = settings
    return settings

