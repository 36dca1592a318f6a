import io
import json
import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from routefinder.config import (
    AppConfig,
    GraphConfig,
    ObservabilityConfig,
    get_config,
    reset_config,
)
from routefinder.logging import ROOT_LOGGER_NAME, setup_logging


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


def test_graph_config_paths(tmp_path):
    config = GraphConfig(data_dir=tmp_path)

    assert config.graph_path == tmp_path / "graph.json"
    assert config.journeys_path == tmp_path / "journeys.json"


def test_graph_config_defaults_to_working_directory(tmp_path, monkeypatch):
    monkeypatch.delenv("RF_GRAPH_DATA_DIR", raising=False)
    monkeypatch.chdir(tmp_path)

    assert GraphConfig().data_dir == Path.cwd()


def test_environment_overrides(tmp_path, monkeypatch):
    monkeypatch.setenv("RF_GRAPH_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("RF_GRAPH_GRAPH_FILE", "network.json")
    monkeypatch.setenv("RF_LOG_LEVEL", "debug")
    monkeypatch.setenv("RF_INDENT", "4")

    config = get_config()

    assert config.graph.graph_path == tmp_path / "network.json"
    assert config.observability.level == "DEBUG"
    assert config.indent == 4


def test_get_config_is_cached():
    assert get_config() is get_config()


def test_unknown_log_level_is_rejected():
    with pytest.raises(ValidationError):
        ObservabilityConfig(level="LOUD")


def test_negative_indent_is_rejected():
    with pytest.raises(ValidationError):
        AppConfig(indent=-1)


def test_setup_logging_plain_format():
    stream = io.StringIO()
    setup_logging(
        ObservabilityConfig(level="INFO", format="%(levelname)s %(message)s"),
        stream=stream,
        force=True,
    )

    logging.getLogger(f"{ROOT_LOGGER_NAME}.test").info("hello")

    assert stream.getvalue() == "INFO hello\n"


def test_setup_logging_structured_includes_extra():
    stream = io.StringIO()
    setup_logging(
        ObservabilityConfig(level="DEBUG", structured=True),
        stream=stream,
        force=True,
    )

    logging.getLogger(f"{ROOT_LOGGER_NAME}.test").debug(
        "Route found", extra={"start": 1, "end": 4}
    )

    record = json.loads(stream.getvalue())
    assert record["message"] == "Route found"
    assert record["level"] == "DEBUG"
    assert record["logger"] == f"{ROOT_LOGGER_NAME}.test"
    assert record["start"] == 1
    assert record["end"] == 4


def test_setup_logging_is_idempotent_without_force():
    first = io.StringIO()
    second = io.StringIO()
    logger = setup_logging(ObservabilityConfig(level="INFO"), stream=first, force=True)

    setup_logging(ObservabilityConfig(level="INFO"), stream=second)

    assert len(logger.handlers) == 1
    logger.info("once")
    assert "once" in first.getvalue()
    assert second.getvalue() == ""
