import logging

from flask import Response, current_app, request

from memshortener.dao.exceptions import ShortcodeGenerationError, ShortURLAlreadyExistsError
from memshortener.handlers import current_short_url_dao
from memshortener.handlers.responses import response_201, response_400, response_500
from memshortener.handlers.constants import (
    SHORTEN_SUCCESS,
    INVALID_JSON_BODY,
    MISSING_URL,
    SHORTCODE_GENERATION_FAILED,
)
from memshortener.utils.helpers import base_url, get_short_url, guarantee_500_response


logger = logging.getLogger(__name__)


@guarantee_500_response
def handler() -> Response:
    """Handle POST / requests to shorten URLs

    This handler follows this procedure to shorten URLs:
    - Step 1: Extract original URL from request body
    - Step 2: Store the URL under a fresh shortcode (via DAO)
    - Step 3: Respond to user with 201 created

    Request body:
        - Content-Type application/json: {"url": "<original url>"}
        - anything else: the raw body text is the original URL

    HTTP responses:
        201: Successful URL shortening
            short_url: newly generated short url
            shortcode: newly generated shortcode
            target_url: original url (provided in request)
        400: Bad client request
            message: indicate cause of bad request (invalid JSON or missing url)
        500: Internal server error
            message: indicate the server failed to generate a shortcode

    Returns:
        flask.Response: JSON response with the status codes above.

    Example:
        >>> client.post('/', data='https://example.com').status_code
        201
        >>> client.post('/', json={'url': 'https://example.com'}).json['short_url']
        'http://localhost:8080/Xk3_a9Qe'
    """
    # 1- Extract original URL from request body
    if request.is_json:
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            logger.info('Invalid JSON body. Responding with 400.', extra={'event': INVALID_JSON_BODY})
            return response_400(message='invalid JSON body', error_code=INVALID_JSON_BODY)
        target_url = payload.get('url')
        if not isinstance(target_url, str):
            target_url = ''
    else:
        target_url = request.get_data(as_text=True)

    target_url = target_url.strip()
    if not target_url:
        logger.info('Missing URL in request body. Responding with 400.', extra={'event': MISSING_URL})
        return response_400(message='missing url in request body', error_code=MISSING_URL)

    # 2- Store the URL under a fresh shortcode
    try:
        shortcode = current_short_url_dao().save(target_url)
    except (ShortcodeGenerationError, ShortURLAlreadyExistsError):
        logger.exception(
            'Failed to generate a shortcode. Responding with 500.',
            extra={'event': SHORTCODE_GENERATION_FAILED},
        )
        return response_500(message='failed to generate shortcode', error_code=SHORTCODE_GENERATION_FAILED)

    # 3- Return successful response to user
    short_url = get_short_url(shortcode, base_url(request, current_app.config.get('BASE_URL')))
    logger.info(
        'Shortened URL. Responding with 201.',
        extra={'shortcode': shortcode, 'event': SHORTEN_SUCCESS},
    )
    return response_201(short_url=short_url, shortcode=shortcode, target_url=target_url)
