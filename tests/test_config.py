"""
Todo App: Configuration and Logging Setup Tests
===============================================

What:  Tests for Settings validation and the log filter parser.
"""

import logging
from unittest.mock import patch

import pytest
from pydantic import ValidationError as PydanticValidationError

from todoapp.config import DEFAULT_MAX_CONTENT_LENGTH, Settings
from todoapp.log import parse_log_filter, setup_logging


class TestParseLogFilter:

    def test_named_directives(self):
        assert parse_log_filter("todoapp=DEBUG,todoapp.access=info") == {
            "todoapp": logging.DEBUG,
            "todoapp.access": logging.INFO,
        }

    def test_bare_level_sets_root(self):
        assert parse_log_filter("warning") == {"": logging.WARNING}

    def test_mixed_with_whitespace_and_empty_directives(self):
        assert parse_log_filter(" ERROR , ,todoapp = debug ,") == {
            "": logging.ERROR,
            "todoapp": logging.DEBUG,
        }

    def test_later_directive_wins(self):
        assert parse_log_filter("todoapp=DEBUG,todoapp=ERROR") == {"todoapp": logging.ERROR}

    def test_empty_string(self):
        assert parse_log_filter("") == {}

    @pytest.mark.parametrize("text", ["LOUD", "todoapp=TRACE", "=DEBUG", "todoapp="])
    def test_invalid_directive(self, text):
        with pytest.raises(ValueError):
            parse_log_filter(text)


class TestSetupLogging:

    def teardown_method(self):
        logging.getLogger("todoapp.setup_test").setLevel(logging.NOTSET)

    def test_applies_levels(self):
        with patch("logging.basicConfig") as basic_config:
            setup_logging("ERROR,todoapp.setup_test=DEBUG")

        assert basic_config.call_args.kwargs["level"] == logging.ERROR
        assert basic_config.call_args.kwargs["force"] is True
        assert logging.getLogger("todoapp.setup_test").level == logging.DEBUG

    def test_root_defaults_to_info(self):
        with patch("logging.basicConfig") as basic_config:
            setup_logging("todoapp.setup_test=WARNING")

        assert basic_config.call_args.kwargs["level"] == logging.INFO
        assert logging.getLogger("todoapp.setup_test").level == logging.WARNING

    def test_invalid_filter_raises_before_configuring(self):
        with patch("logging.basicConfig") as basic_config:
            with pytest.raises(ValueError):
                setup_logging("todoapp=LOUD")

        basic_config.assert_not_called()


class TestSettings:

    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.server_host == "127.0.0.1"
        assert settings.server_port == 3000
        assert settings.max_content_length == DEFAULT_MAX_CONTENT_LENGTH == 2_097_152
        assert settings.auth_secret == "GBA"
        assert settings.reject_malformed_content_length is False

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("MAX_CONTENT_LENGTH", "1024")
        monkeypatch.setenv("AUTH_SECRET", "hunter2")
        monkeypatch.setenv("REJECT_MALFORMED_CONTENT_LENGTH", "true")
        settings = Settings(_env_file=None)
        assert settings.max_content_length == 1024
        assert settings.auth_secret == "hunter2"
        assert settings.reject_malformed_content_length is True

    def test_invalid_log_filter_rejected(self):
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, log_filter="todoapp=LOUD")

    @pytest.mark.parametrize("port", [0, 70000])
    def test_invalid_port_rejected(self, port):
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, server_port=port)

    def test_empty_secret_rejected(self):
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, auth_secret="")

    def test_negative_limit_rejected(self):
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, max_content_length=-1)
