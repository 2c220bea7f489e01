"""Shared pytest fixtures for taiga-selector tests."""

import logging

import pytest

from fakes import FakeSession, make_project
from taiga_selector.config.constants import ENV_VAR_DEFINITIONS
from taiga_selector.utils.logging import PACKAGE_LOGGER


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Clear TAIGA_* settings and point the config dir at a temp directory."""
    for name in ENV_VAR_DEFINITIONS:
        monkeypatch.delenv(name, raising=False)
    config_dir = tmp_path / "config"
    monkeypatch.setenv("TAIGA_SELECTOR_CONFIG_DIR", str(config_dir))
    return config_dir


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers that CLI runs attach to the package logger."""
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def projects():
    """Five sample projects."""
    return [
        make_project(1, "Alpha", is_owner=True),
        make_project(2, "Beta", is_admin=True),
        make_project(3, "Gamma", is_member=True),
        make_project(4, "Delta"),
        make_project(5, "Epsilon"),
    ]
