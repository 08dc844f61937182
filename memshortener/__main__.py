"""Run the URL shortener HTTP service.

Usage:
    python -m memshortener [--host HOST] [--port PORT] [--base-url URL]

Options default to SERVER_HOST, SERVER_PORT and BASE_URL from the
environment (see memshortener.utils.config).
"""

import sys
import argparse
import logging

from memshortener.app import create_app
from memshortener.dao.memory import ShortURLMemoryDAO
from memshortener.exceptions import ConfigurationError
from memshortener.utils import initialize_logging, load_config


logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point.

    Args:
        argv (list[str] | None): command line arguments, sys.argv[1:] by default.

    Returns:
        int: process exit code.
    """
    parser = argparse.ArgumentParser(
        prog='memshortener',
        description='In-memory URL shortener HTTP service',
    )
    parser.add_argument(
        '--host',
        default=None,
        help='Interface to bind (default: $SERVER_HOST or 0.0.0.0)',
    )
    parser.add_argument(
        '--port',
        default=None,
        help='Port to listen on (default: $SERVER_PORT or 8080)',
    )
    parser.add_argument(
        '--base-url',
        default=None,
        help='Public base of generated short URLs (default: $BASE_URL or http://localhost:8080)',
    )
    args = parser.parse_args(argv)

    try:
        config = load_config(host=args.host, port=args.port, base_url=args.base_url)
    except ConfigurationError as e:
        initialize_logging()
        logger.error('Invalid configuration: %s', e, extra={'errorCode': e.error_code})
        return 2

    initialize_logging(config.log_level)

    # Store lives for the lifetime of the process and is owned by the app
    store = ShortURLMemoryDAO()
    app = create_app(store, config)

    logger.info('Starting URL shortener.', extra={'host': config.host, 'port': config.port, 'appEnv': config.app_env})
    app.run(host=config.host, port=config.port, threaded=True)
    return 0


if __name__ == '__main__':
    sys.exit(main())
