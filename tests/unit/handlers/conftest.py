from unittest.mock import MagicMock

import pytest
from flask import Flask
from flask.testing import FlaskClient

from memshortener.app import create_app
from memshortener.dao.base import ShortURLBaseDAO
from memshortener.utils.config import ServerConfig


@pytest.fixture
def short_url_dao() -> ShortURLBaseDAO:
    dao = MagicMock(spec=ShortURLBaseDAO)
    dao.save.return_value = 'Xk3_a9Qe'
    dao.get.return_value = 'https://example.com/blog/chuck-norris-is-awesome'
    return dao


@pytest.fixture
def config() -> ServerConfig:
    return ServerConfig(base_url='https://sho.rt')


@pytest.fixture
def app(short_url_dao: ShortURLBaseDAO, config: ServerConfig) -> Flask:
    app = create_app(short_url_dao, config)
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    return app.test_client()
