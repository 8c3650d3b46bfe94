import os

import voluptuous as vol

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR')


class _EnvKey:
    LOG_LEVEL = 'LEELO_LOG_LEVEL'


class BaseError(Exception):
    pass


class ConfigError(BaseError):
    pass


_ENV_CONFIG_SCHEMA = vol.Schema(
    {
        vol.Optional(_EnvKey.LOG_LEVEL, default='WARNING'): vol.All(str, vol.Upper, vol.In(LOG_LEVELS)),
    },
    extra=vol.ALLOW_EXTRA)


class Config:
    def __init__(self, log_level: str) -> None:
        self.log_level = log_level


def get_config() -> Config:
    try:
        parsed_config = _ENV_CONFIG_SCHEMA(dict(os.environ))
    except vol.Invalid as exc:
        raise ConfigError(f'bad environment configuration: {exc}') from exc
    return Config(
        log_level=parsed_config[_EnvKey.LOG_LEVEL])
