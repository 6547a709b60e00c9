"""
Tests for logging setup.
"""

import logging

import pytest

from envctx.utils.logging import _parse_level, get_logger, setup_logging, setup_logging_from_config


@pytest.fixture(autouse=True)
def reset_envctx_logger():
    yield
    logger = logging.getLogger("envctx")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


class TestParseLevel:
    """Tests for level parsing."""

    def test_names(self):
        assert _parse_level("debug") == logging.DEBUG
        assert _parse_level("ERROR") == logging.ERROR

    def test_int_passthrough(self):
        assert _parse_level(logging.INFO) == logging.INFO

    def test_unknown_defaults_to_warning(self):
        assert _parse_level("chatty") == logging.WARNING


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_sets_level(self):
        logger = setup_logging(level="INFO", use_rich=False)
        assert logger.name == "envctx"
        assert logger.level == logging.INFO

    def test_no_duplicate_handlers(self):
        setup_logging(use_rich=False)
        logger = setup_logging(use_rich=False)
        assert len(logger.handlers) == 1

    def test_rich_handler(self):
        from rich.logging import RichHandler

        logger = setup_logging(use_rich=True)
        assert any(isinstance(h, RichHandler) for h in logger.handlers)

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "envctx.log"
        logger = setup_logging(level="DEBUG", log_file=log_file, console_enabled=False)
        get_logger("envctx.loader").debug("hello file")
        for handler in logger.handlers:
            handler.flush()
        content = log_file.read_text()
        assert "envctx.loader: hello file" in content
        assert "[DEBUG   ]" in content

    def test_no_console_no_file(self):
        logger = setup_logging(console_enabled=False)
        assert all(isinstance(h, logging.NullHandler) for h in logger.handlers)

    def test_child_loggers_propagate(self):
        assert get_logger("envctx.store").parent.name == "envctx"


class TestSetupFromConfig:
    """Tests for setup_logging_from_config()."""

    def test_relative_file_resolved_against_project_dir(self, tmp_path):
        logger = setup_logging_from_config(
            {"logging": {"level": "INFO", "file": "out/envctx.log", "console_enabled": False}},
            project_dir=tmp_path,
        )
        assert logger.level == logging.INFO
        file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
        assert file_handlers[0].baseFilename == str(tmp_path / "out" / "envctx.log")

    def test_plain_console(self):
        logger = setup_logging_from_config({"logging": {"console_type": "plain"}})
        assert any(type(h) is logging.StreamHandler for h in logger.handlers)

    def test_missing_section_uses_defaults(self):
        logger = setup_logging_from_config({})
        assert logger.level == logging.WARNING
