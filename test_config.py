"""
Configuration, logger and CLI tests
"""

import io
import logging
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from vending_core.cli import main
from vending_utils.config import DEFAULT_CONFIG, load_config
from vending_utils.logger import setup_logger


class TestConfig:

    def test_defaults_without_file(self):
        config = load_config()

        assert config == DEFAULT_CONFIG
        assert config is not DEFAULT_CONFIG

    def test_file_overrides_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("logging:\n  level: DEBUG\nunused: 1\n")

        config = load_config(str(path))

        assert config['logging']['level'] == 'DEBUG'
        assert config['logging']['file'] is None
        assert config['display']['title'] == 'VENDING MACHINE'
        assert 'unused' not in config

    def test_empty_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")

        assert load_config(str(path)) == DEFAULT_CONFIG

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "nope.yaml"))

    @pytest.mark.parametrize("text", [
        "- a\n- b\n",
        "display: plain\n",
        "logging:\n  level: 10\n",
        "logging:\n  level: LOUD\n",
        "logging:\n  file: 5\n",
        "display:\n  title: 42\n",
    ])
    def test_malformed_file(self, tmp_path, text):
        path = tmp_path / "config.yaml"
        path.write_text(text)

        with pytest.raises(ValueError):
            load_config(str(path))

    def test_shipped_config_matches_defaults(self):
        path = os.path.join(os.path.dirname(__file__), 'config.yaml')

        assert load_config(path) == DEFAULT_CONFIG


class TestLogger:

    def test_setup_logger(self, tmp_path):
        log_file = tmp_path / "vending.log"
        logger = setup_logger('vending_test', level='info', log_file=str(log_file))

        assert logger.level == logging.INFO
        assert len(logger.handlers) == 2
        assert logger.handlers[0].stream is sys.stderr

        logger.info("hello")
        for handler in logger.handlers:
            handler.flush()
        assert "INFO - vending_test - hello" in log_file.read_text()

        for handler in logger.handlers:
            handler.close()

    def test_repeated_setup_replaces_handlers(self):
        setup_logger('vending_test_again')
        logger = setup_logger('vending_test_again')

        assert len(logger.handlers) == 1

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            setup_logger('vending_test_bad', level='LOUD')


class TestCli:

    def test_runs_session(self):
        stdout = io.StringIO()

        status = main([], stdin=io.StringIO("1\n500\n4\n"), stdout=stdout)

        assert status == 0
        assert "Returning change: GBP 5.00" in stdout.getvalue()

    def test_title_from_config(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("display:\n  title: SNACK STATION\n")
        stdout = io.StringIO()

        main(['--config', str(path)], stdin=io.StringIO("4\n"), stdout=stdout)

        assert "==== SNACK STATION ====" in stdout.getvalue()

    def test_missing_config_fails(self, tmp_path, capsys):
        status = main(['--config', str(tmp_path / "nope.yaml")],
                      stdin=io.StringIO(""), stdout=io.StringIO())

        assert status == 1
        assert "cannot load configuration" in capsys.readouterr().err

    @pytest.mark.parametrize("text", ["logging:\n  level: 10\n", "logging:\n  file: 5\n"])
    def test_mistyped_config_fails_cleanly(self, tmp_path, capsys, text):
        path = tmp_path / "config.yaml"
        path.write_text(text)

        status = main(['--config', str(path)], stdin=io.StringIO(""), stdout=io.StringIO())

        assert status == 1
        assert "cannot load configuration" in capsys.readouterr().err

    def test_bad_log_level_fails(self):
        status = main(['--log-level', 'LOUD'], stdin=io.StringIO(""), stdout=io.StringIO())

        assert status == 1
