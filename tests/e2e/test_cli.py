"""End-to-end tests for the command line interface."""

import json
import logging

import pytest
import yaml

from structural_patterns.cli.formatters import SEPARATOR
from structural_patterns.cli.main import main
from structural_patterns.config import LoggingConfig
from structural_patterns.infrastructure.logging.logger import ROOT_LOGGER_NAME, setup_logging


def test_composite_text_output(capsys):
    exit_code = main(["composite"])

    out = capsys.readouterr().out.splitlines()
    assert exit_code == 0
    assert out == [
        "Structural : Composite pattern executed..",
        "Drawing Composite: Group 2",
        "Drawing Circle: Circle 2",
        "Drawing Composite: Group 1",
        "Drawing Circle: Circle 1",
        "Drawing Rectangle: Rectangle 1",
        SEPARATOR,
    ]


def test_flyweight_json_output(capsys):
    exit_code = main(["--format", "json", "flyweight"])

    data = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert data["flyweight"]["stats"] == {"trees": 5, "tree_types": 3}
    assert len(data["flyweight"]["lines"]) == 5


def test_all_yaml_output(capsys):
    exit_code = main(["--format", "yaml", "all"])

    data = yaml.safe_load(capsys.readouterr().out)
    assert exit_code == 0
    assert list(data) == ["composite", "flyweight"]


def test_format_from_config_file(tmp_path, capsys):
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({"output": {"format": "json"}}))

    exit_code = main(["--config", str(config_file), "composite"])

    data = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert data["composite"]["stats"]["leaves"] == 3


def test_bad_config_file_exits_with_error(tmp_path, capsys):
    exit_code = main(["--config", str(tmp_path / "missing.json"), "composite"])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert "Error: Failed to load configuration" in captured.err
    assert captured.out == ""


def test_unknown_pattern_is_rejected_by_parser():
    with pytest.raises(SystemExit):
        main(["adapter"])


def test_bad_config_file_logs_error_details(tmp_path, caplog):
    with caplog.at_level(logging.ERROR, logger=ROOT_LOGGER_NAME):
        exit_code = main(["--config", str(tmp_path / "missing.json"), "composite"])

    messages = [record.getMessage() for record in caplog.records]
    assert exit_code == 1
    assert any("error_code='ConfigurationError'" in message for message in messages)
    assert any("error_type='ConfigurationError'" in message for message in messages)


def test_log_level_flag_overrides_config(capsys):
    try:
        exit_code = main(["--log-level", "DEBUG", "composite"])

        assert exit_code == 0
        assert logging.getLogger(ROOT_LOGGER_NAME).level == logging.DEBUG
        assert capsys.readouterr().out.startswith("Structural : Composite pattern executed..")
    finally:
        setup_logging(LoggingConfig())

    assert logging.getLogger(ROOT_LOGGER_NAME).level == logging.WARNING
