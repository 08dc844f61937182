"""Response builders shared by the HTTP handlers

Error bodies always look like:

    {"message": "Bad Request (<detail>)", "errorCode": "<CODE>"}

NOTE: builders use flask.jsonify and must run inside an app context.
"""

from flask import Response, jsonify


def response_201(*, short_url: str, shortcode: str, target_url: str) -> Response:
    response = jsonify(
        {
            'short_url': short_url,
            'shortcode': shortcode,
            'target_url': target_url,
        }
    )
    response.status_code = 201
    return response


def response_307(*, location: str) -> Response:
    # no body needed for redirects
    return Response(status=307, headers={'Location': location})


def response_400(message: str | None = None, error_code: str | None = None) -> Response:
    base = 'Bad Request'
    body = {'message': base if not message else f'{base} ({message})'}
    if error_code:
        body['errorCode'] = error_code
    response = jsonify(body)
    response.status_code = 400
    return response


def response_500(message: str | None = None, error_code: str | None = None) -> Response:
    base = 'Internal Server Error'
    body = {'message': base if not message else f'{base} ({message})'}
    if error_code:
        body['errorCode'] = error_code
    response = jsonify(body)
    response.status_code = 500
    return response
