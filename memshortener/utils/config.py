"""Utility functions for application configuration management.

Configuration is read from environment variables once, at process start,
and handed to the app factory as an immutable ServerConfig. Command line
options given to `python -m memshortener` take precedence over the
environment.

Environment variables:
    APP_ENV       – Application environment, `'local'` by default.
    LOG_LEVEL     – Root log level, `'INFO'` by default.
    SERVER_HOST   – Bind host, `'0.0.0.0'` by default.
    SERVER_PORT   – Bind port, `8080` by default.
    BASE_URL      – Public base of generated short URLs,
                    `'http://localhost:8080'` by default.

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`) value,
        defaulting to `'local'`.

    load_config(**overrides) -> ServerConfig
        Build the server configuration from the environment.

Example:
    >>> from memshortener.utils.config import load_config
    >>> config = load_config(port=9000)
    >>> config.port
    9000
"""

import os
import logging
from dataclasses import dataclass

from memshortener.constants import ENV, Defaults
from memshortener.exceptions import BadConfigurationError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServerConfig:
    """Runtime configuration of the HTTP service.

    Attributes:
        app_env (str):
            Application environment name (e.g. 'local', 'prod').
        log_level (str):
            Root log level name.
        host (str):
            Interface the HTTP server binds to.
        port (int):
            TCP port the HTTP server listens on.
        base_url (str | None):
            Public base of generated short URLs. None means "use the
            host of the incoming request".
    """

    app_env: str = Defaults.APP_ENV
    log_level: str = Defaults.LOG_LEVEL
    host: str = Defaults.SERVER_HOST
    port: int = Defaults.SERVER_PORT
    base_url: str | None = Defaults.BASE_URL


def app_env() -> str:
    """Return the current application environment by reading 'APP_ENV'

    Returns:
        str:
            Value of `APP_ENV` environment variable, `'local'` by default.

    Example:
        >>> os.environ['APP_ENV'] = 'prod'
        >>> app_env()
        'prod'
    """
    return os.environ.get(ENV.App.APP_ENV, Defaults.APP_ENV).lower()


def _parse_port(value: str | int) -> int:
    try:
        port = int(value)
    except (TypeError, ValueError) as e:
        raise BadConfigurationError(f'Server port must be an integer (given value: {value!r}).') from e
    if not 0 < port < 65536:
        raise BadConfigurationError(f'Server port must be within 1-65535 (given value: {port}).')
    return port


def load_config(
    host: str | None = None,
    port: str | int | None = None,
    base_url: str | None = None,
) -> ServerConfig:
    """Load the server configuration

    Explicit arguments win over environment variables, which win over
    the built-in defaults.

    Args:
        host (str | None):
            Bind host override.
        port (str | int | None):
            Bind port override.
        base_url (str | None):
            Short URL base override.

    Returns:
        ServerConfig: The resolved configuration.

    Raises:
        BadConfigurationError:
            If the port is not an integer within 1-65535.

    Example:
        >>> os.environ['SERVER_PORT'] = '9000'
        >>> load_config().port
        9000
    """
    port = port if port is not None else os.getenv(ENV.Server.PORT, Defaults.SERVER_PORT)
    base_url = base_url if base_url is not None else os.getenv(ENV.Server.BASE_URL, Defaults.BASE_URL)

    config = ServerConfig(
        app_env=app_env(),
        log_level=os.getenv(ENV.App.LOG_LEVEL, Defaults.LOG_LEVEL).upper(),
        host=host or os.getenv(ENV.Server.HOST, Defaults.SERVER_HOST),
        port=_parse_port(port),
        base_url=base_url.rstrip('/') or None,
    )
    logger.debug('Loaded server configuration.', extra={'appEnv': config.app_env, 'port': config.port})
    return config
