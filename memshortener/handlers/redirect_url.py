import logging

from flask import Response

from memshortener.dao.exceptions import ShortURLNotFoundError
from memshortener.handlers import current_short_url_dao
from memshortener.handlers.responses import response_307, response_400
from memshortener.handlers.constants import (
    MISSING_SHORTCODE,
    SHORT_URL_NOT_FOUND,
    REDIRECT_SUCCESS,
)
from memshortener.utils.helpers import guarantee_500_response


logger = logging.getLogger(__name__)


@guarantee_500_response
def handler(shortcode: str) -> Response:
    """Handle GET /<shortcode> requests to redirect URLs

    This handler follows this procedure to redirect URLs:
    - Step 1: Get target URL from the store
    - Step 2: Redirect client to target URL

    HTTP responses:
        307: Successful redirect
            headers:
                Location: target URL destination
        400: Bad client request
            message: unknown shortcode

    Args:
        shortcode (str):
            Shortcode taken from the request path.

    Returns:
        flask.Response: redirect or JSON error response.

    Example:
        >>> response = client.get('/Xk3_a9Qe')
        >>> response.status_code
        307
        >>> response.headers['Location']
        'https://example.com/my-page'
    """
    # 1- Get target URL from the store
    try:
        target_url = current_short_url_dao().get(shortcode)
    except ShortURLNotFoundError:
        logger.info(
            'Short URL record not found. Responding with 400.',
            extra={'shortcode': shortcode, 'event': SHORT_URL_NOT_FOUND},
        )
        return response_400(message=f"short url '{shortcode}' doesn't exist", error_code=SHORT_URL_NOT_FOUND)

    # 2- Redirect client to target URL
    logger.info(
        'Redirecting client to target URL. Responding with 307.',
        extra={'shortcode': shortcode, 'event': REDIRECT_SUCCESS},
    )
    return response_307(location=target_url)


@guarantee_500_response
def missing_shortcode_handler() -> Response:
    """Handle GET / requests, which carry no shortcode"""
    logger.info('Missing shortcode in path. Responding with 400.', extra={'event': MISSING_SHORTCODE})
    return response_400(message='missing shortcode in path', error_code=MISSING_SHORTCODE)
