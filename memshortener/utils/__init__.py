from memshortener.utils.config import ServerConfig, app_env, load_config
from memshortener.utils.helpers import base_url, get_short_url, guarantee_500_response
from memshortener.utils.shortener import generate_shortcode
from memshortener.utils.logging import initialize_logging


__all__ = [
    'generate_shortcode',
    'ServerConfig',
    'app_env',
    'load_config',
    'base_url',
    'get_short_url',
    'guarantee_500_response',
    'initialize_logging',
]
