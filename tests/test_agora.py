import importlib
import logging
from unittest.mock import MagicMock

import pytest

import agora
import config


def test_bind_failure_is_fatal(mocker, caplog):
    # 1. ARRANGE: the server cannot bind its port.
    mock_socketio = MagicMock()
    mock_socketio.run.side_effect = OSError("[Errno 98] Address already in use")
    mocker.patch("agora.create_app", return_value=(MagicMock(), mock_socketio, None))

    # 2. ACT
    with caplog.at_level(logging.CRITICAL):
        with pytest.raises(SystemExit) as excinfo:
            agora.main()

    # 3. ASSERT
    assert excinfo.value.code == 1
    critical = [r for r in caplog.records if r.levelno == logging.CRITICAL]
    assert len(critical) == 1
    assert "Address already in use" in critical[0].getMessage()
    mock_socketio.run.assert_called_once()


def test_clean_shutdown_does_not_exit(mocker):
    mock_socketio = MagicMock()
    mocker.patch("agora.create_app", return_value=(MagicMock(), mock_socketio, None))

    agora.main()

    mock_socketio.run.assert_called_once()


def test_async_mode_ignores_environment(monkeypatch):
    monkeypatch.setenv("ASYNC_MODE", "threading")
    try:
        reloaded = importlib.reload(config)
        assert reloaded.ASYNC_MODE == "eventlet"
    finally:
        monkeypatch.delenv("ASYNC_MODE")
        importlib.reload(config)
