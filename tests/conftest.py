import logging

import pytest
import structlog

from schema_projector.config import Config

_ENV_VARS = (
    "SCHEMA_PROJECTOR_NO_IMPLICIT_ADDITIONAL_PROPERTIES",
    "SCHEMA_PROJECTOR_SUPPRESS_ADVISORY_WARNINGS",
    "SCHEMA_PROJECTOR_LOGGING__LEVEL",
    "SCHEMA_PROJECTOR_LOGGING__FORMAT",
    "SCHEMA_PROJECTOR_LOGGING__FILE",
    "SCHEMA_PROJECTOR_CONFIG_FILE",
)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep host env vars and .env files out of Config, and undo global logging setup."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()


@pytest.fixture
def app_config() -> Config:
    return Config(suppress_advisory_warnings=True)


@pytest.fixture
def strict_config() -> Config:
    return Config(no_implicit_additional_properties=True, suppress_advisory_warnings=True)
