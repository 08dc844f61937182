"""Unit tests for the POST / (shorten_url) handler.

Test coverage includes:

1. Successful shortening
   - Raw text and JSON request bodies return HTTP 201 with the short URL.

2. Invalid JSON body
   - Malformed or non-object JSON bodies return HTTP 400.

3. Missing URL
   - Empty bodies or missing `url` keys return HTTP 400.

4. Generation failures
   - ShortcodeGenerationError and ShortURLAlreadyExistsError return HTTP 500.

5. Unexpected errors
   - Unknown exceptions return a generic HTTP 500 outside the local environment.
"""

import pytest
from pytest import MonkeyPatch

from memshortener.app import create_app
from memshortener.dao.exceptions import ShortcodeGenerationError, ShortURLAlreadyExistsError
from memshortener.utils.config import ServerConfig


# -------------------------------
# 1. Successful shortening
# -------------------------------


def test_shorten_raw_body(client, short_url_dao):
    response = client.post('/', data='https://example.com/blog', content_type='text/plain')

    assert response.status_code == 201
    assert response.mimetype == 'application/json'
    assert response.get_json() == {
        'short_url': 'https://sho.rt/Xk3_a9Qe',
        'shortcode': 'Xk3_a9Qe',
        'target_url': 'https://example.com/blog',
    }
    short_url_dao.save.assert_called_once_with('https://example.com/blog')


def test_shorten_json_body(client, short_url_dao):
    response = client.post('/', json={'url': 'https://example.com/blog'})

    assert response.status_code == 201
    assert response.get_json()['short_url'] == 'https://sho.rt/Xk3_a9Qe'
    short_url_dao.save.assert_called_once_with('https://example.com/blog')


def test_shorten_strips_whitespace(client, short_url_dao):
    response = client.post('/', data='  https://example.com/blog\n')

    assert response.status_code == 201
    short_url_dao.save.assert_called_once_with('https://example.com/blog')


def test_shorten_uses_request_host_without_base_url(short_url_dao):
    app = create_app(short_url_dao, ServerConfig(base_url=None))
    response = app.test_client().post('/', data='https://example.com/blog', base_url='http://testhost:1000')

    assert response.status_code == 201
    assert response.get_json()['short_url'] == 'http://testhost:1000/Xk3_a9Qe'


# -------------------------------
# 2. Invalid JSON body
# -------------------------------


@pytest.mark.parametrize('body', ['{"url": ', '["https://example.com"]', 'null', '"https://example.com"'])
def test_shorten_invalid_json_body(client, short_url_dao, body):
    response = client.post('/', data=body, content_type='application/json')
    body = response.get_json()

    assert response.status_code == 400
    assert body['message'] == 'Bad Request (invalid JSON body)'
    assert body['errorCode'] == 'INVALID_JSON_BODY'
    short_url_dao.save.assert_not_called()


# -------------------------------
# 3. Missing URL
# -------------------------------


@pytest.mark.parametrize('data', ['', '   ', '\n'])
def test_shorten_empty_raw_body(client, short_url_dao, data):
    response = client.post('/', data=data)
    body = response.get_json()

    assert response.status_code == 400
    assert body['message'] == 'Bad Request (missing url in request body)'
    assert body['errorCode'] == 'MISSING_URL'
    short_url_dao.save.assert_not_called()


@pytest.mark.parametrize('payload', [{}, {'target_url': 'https://example.com'}, {'url': ''}, {'url': 42}, {'url': None}])
def test_shorten_json_without_url(client, short_url_dao, payload):
    response = client.post('/', json=payload)

    assert response.status_code == 400
    assert response.get_json()['errorCode'] == 'MISSING_URL'
    short_url_dao.save.assert_not_called()


# -------------------------------
# 4. Generation failures
# -------------------------------


@pytest.mark.parametrize('error', [ShortcodeGenerationError('no entropy'), ShortURLAlreadyExistsError('taken')])
def test_shorten_generation_failure(client, short_url_dao, error):
    short_url_dao.save.side_effect = error

    response = client.post('/', data='https://example.com/blog')
    body = response.get_json()

    assert response.status_code == 500
    assert body['message'] == 'Internal Server Error (failed to generate shortcode)'
    assert body['errorCode'] == 'SHORTCODE_GENERATION_FAILED'


# -------------------------------
# 5. Unexpected errors
# -------------------------------


def test_shorten_unexpected_error(monkeypatch: MonkeyPatch, short_url_dao):
    """The app's own APP_ENV decides between the JSON 500 and re-raising."""
    monkeypatch.delenv('APP_ENV', raising=False)
    short_url_dao.save.side_effect = RuntimeError('boom')
    app = create_app(short_url_dao, ServerConfig(app_env='prod', base_url='https://sho.rt'))
    app.config['TESTING'] = True

    response = app.test_client().post('/', data='https://example.com/blog')

    assert response.status_code == 500
    assert response.mimetype == 'application/json'
    assert response.get_json() == {'message': 'Internal Server Error', 'errorCode': 'UNKNOWN_INTERNAL_SERVER_ERROR'}


def test_shorten_unexpected_error_ignores_process_environment(monkeypatch: MonkeyPatch, short_url_dao):
    monkeypatch.setenv('APP_ENV', 'local')
    short_url_dao.save.side_effect = RuntimeError('boom')
    app = create_app(short_url_dao, ServerConfig(app_env='prod'))
    app.config['TESTING'] = True

    response = app.test_client().post('/', data='https://example.com/blog')

    assert response.status_code == 500
    assert response.get_json()['errorCode'] == 'UNKNOWN_INTERNAL_SERVER_ERROR'


def test_shorten_unexpected_error_reraises_locally(monkeypatch: MonkeyPatch, short_url_dao):
    monkeypatch.setenv('APP_ENV', 'prod')
    short_url_dao.save.side_effect = RuntimeError('boom')
    app = create_app(short_url_dao, ServerConfig(app_env='local'))
    app.config['TESTING'] = True

    with pytest.raises(RuntimeError, match='boom'):
        app.test_client().post('/', data='https://example.com/blog')
