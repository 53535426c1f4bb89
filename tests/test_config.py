# tests/test_config.py
"""
Settings from INFLECT_* environment variables, the flags they give the
default engine, and structlog setup.
"""

from __future__ import annotations

import structlog

from english_inflect.core.domain.models import ClassicalFlags
from english_inflect.shared.config import LogFormat, Settings
from english_inflect.shared.container import Container
from english_inflect.shared.logging_setup import get_logger, init_logging


def test_defaults(monkeypatch) -> None:
    for name in ("LOG_LEVEL", "LOG_FORMAT", "CLASSICAL_ALL", "CLASSICAL_HERD"):
        monkeypatch.delenv(f"INFLECT_{name}", raising=False)
    settings = Settings(_env_file=None)
    assert settings.LOG_LEVEL == "WARNING"
    assert settings.LOG_FORMAT is LogFormat.CONSOLE
    assert settings.initial_classical_flags() == ClassicalFlags()


def test_env_prefix_and_per_flag_overrides(monkeypatch) -> None:
    monkeypatch.setenv("INFLECT_CLASSICAL_ALL", "true")
    monkeypatch.setenv("INFLECT_CLASSICAL_PERSONS", "false")
    monkeypatch.setenv("INFLECT_LOG_FORMAT", "json")
    settings = Settings(_env_file=None)

    flags = settings.initial_classical_flags()
    assert flags.all and flags.ancient and flags.herd
    assert flags.persons is False
    assert settings.LOG_FORMAT is LogFormat.JSON


def test_container_builds_default_engine_from_settings(monkeypatch) -> None:
    monkeypatch.setenv("INFLECT_CLASSICAL_ANCIENT", "1")
    container = Container()
    container.config.override(Settings(_env_file=None))

    engine = container.default_engine()
    assert engine.is_classical_ancient()
    assert engine.plural("formula") == "formulae"
    assert container.default_engine() is engine


def test_init_logging_is_idempotent_and_forceable() -> None:
    init_logging()
    init_logging()
    init_logging(level="DEBUG", log_format=LogFormat.JSON, force=True)
    assert structlog.is_configured()

    log = get_logger(__name__)
    log.debug("config_test_event", answer=42)

    init_logging(force=True)
