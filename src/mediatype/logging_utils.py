"""This module contains the logging configuration for the media type checker."""

import contextlib
import logging
import logging.config


class OneLineExceptionFormatter(logging.Formatter):
    """A custom formatter that formats exceptions into one line."""
    def formatException(self, exc_info) -> str:  # type: ignore[no-untyped-def]  # noqa: N802 , D102 , ANN001 (overriden method)
        return repr(super().formatException(exc_info))

    def format(self, record: logging.LogRecord) -> str:  # noqa: D102 (overriden method)
        s = super().format(record)
        return s.replace("\n", "") + "|" if record.exc_text else s.replace("\n", "\\n")


def configure_logger(log_levels: str = ":WARNING") -> None:
    """Configures logging to stderr.

    Args:
        log_levels (str, optional): A string that defines log levels for various named loggers. Defaults to
            ":WARNING".

    A valid `log_levels` string looks something like this:
        mediatype.parser:DEBUG,:ERROR,custom:35

    The above would set the following log levels:
        * root:               ERROR
        * mediatype.parser    DEBUG
        * custom              35

    A special case is the logger named `!console` which will set the `console` log handler to the specified level.
    """
    logger_level_map = parse_log_levels(log_levels)
    logging.config.dictConfig(
        {
            "version": 1,
            "formatters": {
                "default": {
                    "()": "mediatype.logging_utils.OneLineExceptionFormatter",
                    "format": "%(asctime)s (%(name)s) [%(levelname)s] %(message)s",
                    "datefmt": "%Y-%m-%dT%H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "level": logger_level_map.get("!console", None) or "NOTSET",
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "stream": "ext://sys.stderr",
                },
            },
            "loggers": {
                "root": {"level": logger_level_map["root"], "handlers": ["console"]},
            },
            "disable_existing_loggers": False,
        },
    )

    for logger_name, level_text in logger_level_map.items():
        if logger_name in ["!console", "root"]:
            continue
        logging.getLogger(logger_name).setLevel(level_text)
    logging.getLogger(__name__).debug("Log levels = '%s'", log_levels)


def parse_log_levels(log_levels: str) -> dict[str, str | int]:
    """Parses a `log_levels` string into a map of logger name to level.

    Badly-formatted items and unknown level names are ignored. The root logger defaults to WARNING.
    """
    level_map = logging.getLevelNamesMapping()
    levels: dict[str, str | int] = {}
    for item in [x.split(":") for x in [c.strip() for c in log_levels.split(",") if c.strip()]]:
        with contextlib.suppress(ValueError):  # Ignore badly-formatted input values
            logger_name, level_text, *_ = item
            logger_name = logger_name.strip() or "root"
            level_text = level_text.strip().upper()

            if level_text in level_map:
                levels[logger_name] = level_text
            elif level_text.isdigit():
                levels[logger_name] = int(level_text)

    levels.setdefault("root", "WARNING")
    return levels
