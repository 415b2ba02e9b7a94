"""
Pytest tests for process startup: fail fast on missing database configuration.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from jiji_backend.core.exceptions import ConfigurationMissing

from conftest import VALID_ENV


def test_main_exits_on_missing_env(clean_env):
    """main() exits with status 1 before building the server."""
    import main

    with patch("uvicorn.run") as run:
        with pytest.raises(SystemExit) as exc:
            main.main()
    assert exc.value.code == 1
    run.assert_not_called()


def test_main_exits_on_one_missing_name(clean_env):
    for k, v in VALID_ENV.items():
        if k != "POSTGRES_PASSWORD":
            clean_env.setenv(k, v)
    import main

    with patch("uvicorn.run") as run:
        with pytest.raises(SystemExit):
            main.main()
    run.assert_not_called()


def test_main_serves_on_configured_port(clean_env):
    """Full configuration: uvicorn runs on PORT and the pool is disposed afterwards."""
    for k, v in VALID_ENV.items():
        clean_env.setenv(k, v)
    clean_env.setenv("PORT", "4321")
    import main

    with patch("uvicorn.run") as run:
        main.main()
    run.assert_called_once()
    assert run.call_args.kwargs["port"] == 4321
    assert run.call_args.kwargs["host"] == "0.0.0.0"


def test_lifespan_fails_without_config(clean_env):
    """App started without a pool resolves settings on startup and refuses to start."""
    from jiji_backend.api_server.server import create_app

    with pytest.raises(ConfigurationMissing):
        with TestClient(create_app()):
            pass


def test_lifespan_builds_and_disposes_pool(clean_env):
    from jiji_backend.api_server.server import create_app
    from jiji_backend.config import get_settings

    app = create_app(settings=get_settings(VALID_ENV))
    with TestClient(app) as c:
        assert app.state.pool is not None
        assert c.get("/health").status_code == 200
    assert app.state.pool is None


def test_main_logs_invalid_configuration(clean_env):
    """An unparseable number is reported as invalid, not as missing."""
    for k, v in VALID_ENV.items():
        clean_env.setenv(k, v)
    clean_env.setenv("POSTGRES_PORT", "abc")
    import main

    with patch.object(main, "logger") as logger, patch("uvicorn.run") as run:
        with pytest.raises(SystemExit) as exc:
            main.main()
    assert exc.value.code == 1
    run.assert_not_called()
    args, kwargs = logger.error.call_args
    assert args[0] == "invalid_configuration"
    assert kwargs["variable"] == "POSTGRES_PORT"


def test_main_logs_missing_names(clean_env):
    import main

    with patch.object(main, "logger") as logger, patch("uvicorn.run"):
        with pytest.raises(SystemExit):
            main.main()
    args, kwargs = logger.error.call_args
    assert args[0] == "missing_required_environment_variables"
    assert kwargs["missing"] == list(VALID_ENV)


def test_lifespan_logs_invalid_configuration(clean_env):
    from jiji_backend.api_server import server
    from jiji_backend.core.exceptions import ConfigurationInvalid

    for k, v in VALID_ENV.items():
        clean_env.setenv(k, v)
    clean_env.setenv("PORT", "not-a-port")
    with patch.object(server, "logger") as logger:
        with pytest.raises(ConfigurationInvalid):
            with TestClient(server.create_app()):
                pass
    assert logger.error.call_args[0][0] == "invalid_configuration"
