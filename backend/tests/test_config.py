import importlib

import config
from arena import socketio


def _reload(monkeypatch, **env):
    for key, value in env.items():
        monkeypatch.setenv(key, value)
    return importlib.reload(config).Config


def test_werkzeug_is_opt_in(monkeypatch):
    monkeypatch.delenv('ALLOW_UNSAFE_WERKZEUG', raising=False)
    monkeypatch.delenv('FLASK_DEBUG', raising=False)
    cfg = _reload(monkeypatch)
    assert cfg.ALLOW_UNSAFE_WERKZEUG is False
    assert cfg.DEBUG is False

    cfg = _reload(monkeypatch, ALLOW_UNSAFE_WERKZEUG='1', FLASK_DEBUG='1')
    assert cfg.ALLOW_UNSAFE_WERKZEUG is True
    assert cfg.DEBUG is True
    monkeypatch.undo()
    importlib.reload(config)


def test_cors_origins_parsing(monkeypatch):
    assert _reload(monkeypatch, CORS_ORIGINS='*').CORS_ORIGINS == '*'
    cfg = _reload(monkeypatch, CORS_ORIGINS='http://a.test, http://b.test')
    assert cfg.CORS_ORIGINS == ['http://a.test', 'http://b.test']
    monkeypatch.undo()
    importlib.reload(config)


def test_socket_handlers_run_in_order(flask_app):
    assert socketio.server.async_handlers is False
