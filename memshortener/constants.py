from enum import StrEnum


class Shortcode:
    """Shortcode generation parameters."""

    # 6 random bytes encode to 8 unpadded base64 characters
    NUM_BYTES = 6
    LENGTH = 8
    # Fresh shortcodes drawn before giving up on a colliding insert
    MAX_ATTEMPTS = 3


class Defaults:
    """Default runtime configuration values."""

    APP_ENV = 'local'
    LOG_LEVEL = 'INFO'
    SERVER_HOST = '0.0.0.0'  # noqa: S104
    SERVER_PORT = 8080
    BASE_URL = 'http://localhost:8080'


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        LOG_LEVEL = 'LOG_LEVEL'

    class Server(StrEnum):
        HOST = 'SERVER_HOST'
        PORT = 'SERVER_PORT'
        BASE_URL = 'BASE_URL'


# Error codes
UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'
