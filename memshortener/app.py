"""Flask application factory

Wires the HTTP routes to an injected short URL DAO:

    POST /             -> handlers.shorten_url.handler
    GET  /             -> handlers.redirect_url.missing_shortcode_handler
    GET  /<shortcode>  -> handlers.redirect_url.handler

Example:
    >>> from memshortener.app import create_app
    >>> from memshortener.dao.memory import ShortURLMemoryDAO
    >>> app = create_app(ShortURLMemoryDAO())
    >>> app.run(threaded=True)
"""

import time
import logging

from flask import Flask, Response, g, request

from memshortener.dao.base import ShortURLBaseDAO
from memshortener.handlers import shorten_url, redirect_url
from memshortener.handlers.constants import SHORT_URL_DAO_EXTENSION
from memshortener.utils.config import ServerConfig


logger = logging.getLogger(__name__)


def create_app(short_url_dao: ShortURLBaseDAO, config: ServerConfig | None = None) -> Flask:
    """Build the Flask application around a short URL DAO

    Args:
        short_url_dao (ShortURLBaseDAO):
            Store used by every request. The app keeps a reference for its
            whole lifetime; there is no module-level store.
        config (ServerConfig | None):
            Server configuration. Defaults to ServerConfig().

    Returns:
        Flask: The configured application.
    """
    config = config or ServerConfig()

    app = Flask(__name__)
    app.config['BASE_URL'] = config.base_url
    app.config['APP_ENV'] = config.app_env
    app.extensions[SHORT_URL_DAO_EXTENSION] = short_url_dao

    app.add_url_rule('/', 'shorten_url', shorten_url.handler, methods=['POST'])
    app.add_url_rule('/', 'missing_shortcode', redirect_url.missing_shortcode_handler, methods=['GET'])
    app.add_url_rule('/<shortcode>', 'redirect_url', redirect_url.handler, methods=['GET'])

    @app.before_request
    def _start_timer() -> None:
        g.request_started_at = time.perf_counter()

    @app.after_request
    def _log_request(response: Response) -> Response:
        started_at = g.get('request_started_at')
        duration_ms = (time.perf_counter() - started_at) * 1000 if started_at is not None else None
        logger.info(
            'Request served.',
            extra={
                'method': request.method,
                'path': request.path,
                'status': response.status_code,
                'duration_ms': round(duration_ms, 2) if duration_ms is not None else None,
                'remote_addr': request.remote_addr,
            },
        )
        return response

    return app
