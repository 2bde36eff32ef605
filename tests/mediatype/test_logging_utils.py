import logging
import sys

import pytest

from mediatype.logging_utils import OneLineExceptionFormatter, configure_logger, parse_log_levels


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("mediatype.parser").setLevel(logging.NOTSET)


def describe_parse_log_levels():

    def sets_root_from_empty_logger_name():
        assert parse_log_levels(":INFO") == {"root": "INFO"}

    def parses_named_and_numeric_levels():
        assert parse_log_levels("mediatype:debug, :ERROR,custom:35") == {
            "mediatype": "DEBUG",
            "root": "ERROR",
            "custom": 35,
        }

    def ignores_badly_formatted_items():
        assert parse_log_levels("bad,x:NOPE,,") == {"root": "WARNING"}

    def keeps_console_level():
        assert parse_log_levels("!console:INFO") == {"!console": "INFO", "root": "WARNING"}


def describe_configure_logger():

    def sets_levels_of_named_loggers(restore_logging):
        # *** ACT ***
        configure_logger("mediatype.parser:DEBUG,:ERROR")

        # *** ASSERT ***
        assert logging.getLogger("mediatype.parser").level == logging.DEBUG
        assert logging.getLogger().level == logging.ERROR


def describe_one_line_exception_formatter():

    def formats_exception_on_one_line():
        # *** ARRANGE ***
        formatter = OneLineExceptionFormatter("%(message)s")
        try:
            raise ValueError("boom")
        except ValueError:
            record = logging.LogRecord("test", logging.ERROR, __file__, 1, "failed", None, sys.exc_info())

        # *** ACT ***
        s = formatter.format(record)

        # *** ASSERT ***
        assert "\n" not in s
        assert s.startswith("failed")
        assert s.endswith("|")
        assert "ValueError: boom" in s
