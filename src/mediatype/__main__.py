"""Checks the media types given on the command line and prints their parts as JSON."""

import argparse
import json
import logging
import sys

import environ
from dotenv import find_dotenv, load_dotenv

from .config import CheckerConfig
from .converters import make_media_type_converter
from .exceptions import MediaTypeError
from .logging_utils import configure_logger
from .parser import parse_media_type
from .policy import is_failure

logger = logging.getLogger("mediatype")


def main(argv: list[str] | None = None) -> int:
    """The main entry point for the checker.

    Returns:
        int: The exit code, 0 when every argument is a media type and 1 otherwise.
    """
    load_dotenv(find_dotenv(usecwd=True))
    cfg = environ.to_config(CheckerConfig)
    configure_logger(cfg.log_levels)

    arg_parser = argparse.ArgumentParser(prog="python -m mediatype", description=__doc__)
    arg_parser.add_argument("media_types", nargs="+", metavar="MEDIA_TYPE", help="a media type to check")
    args = arg_parser.parse_args(argv)

    converter = make_media_type_converter()
    exit_code = 0
    for text in args.media_types:
        try:
            result = parse_media_type(text, cfg.policy)
        except MediaTypeError as ex:
            print(ex.message, file=sys.stderr)
            return 1
        if is_failure(result):
            print(result.message, file=sys.stderr)
            exit_code = 1
            continue
        print(json.dumps({"media_type": text, "parts": converter.unstructure(result)}, indent=cfg.json_indent))

    logger.debug("Checked %d media types, exit code %d", len(args.media_types), exit_code)
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
