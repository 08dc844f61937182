"""Unit tests for the `python -m memshortener` entry point."""

from unittest.mock import MagicMock, patch

import pytest
from pytest import MonkeyPatch

from memshortener import __main__ as entry_point
from memshortener.constants import ENV
from memshortener.dao.memory import ShortURLMemoryDAO


@pytest.fixture(autouse=True)
def _env(monkeypatch: MonkeyPatch) -> None:
    for name in (*ENV.App, *ENV.Server):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(entry_point, 'initialize_logging', MagicMock())


def test_main_runs_threaded_server_with_injected_store() -> None:
    app = MagicMock()
    with patch.object(entry_point, 'create_app', return_value=app) as create_app:
        exit_code = entry_point.main(['--host', '127.0.0.1', '--port', '9000', '--base-url', 'https://sho.rt'])

    assert exit_code == 0
    store, config = create_app.call_args.args
    assert isinstance(store, ShortURLMemoryDAO)
    assert store.count() == 0
    assert config.host == '127.0.0.1'
    assert config.port == 9000
    assert config.base_url == 'https://sho.rt'
    app.run.assert_called_once_with(host='127.0.0.1', port=9000, threaded=True)


def test_main_reads_environment(monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setenv(ENV.Server.PORT, '9100')
    app = MagicMock()
    with patch.object(entry_point, 'create_app', return_value=app):
        assert entry_point.main([]) == 0

    app.run.assert_called_once_with(host='0.0.0.0', port=9100, threaded=True)


def test_main_with_bad_configuration() -> None:
    with patch.object(entry_point, 'create_app') as create_app:
        exit_code = entry_point.main(['--port', 'http'])

    assert exit_code == 2
    create_app.assert_not_called()


def test_main_initializes_logging_with_configured_level(monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setenv(ENV.App.LOG_LEVEL, 'debug')
    with patch.object(entry_point, 'create_app', return_value=MagicMock()):
        assert entry_point.main([]) == 0

    entry_point.initialize_logging.assert_called_once_with('DEBUG')


def test_main_initializes_default_logging_on_bad_configuration() -> None:
    with patch.object(entry_point, 'create_app'):
        assert entry_point.main(['--port', '0']) == 2

    entry_point.initialize_logging.assert_called_once_with()
