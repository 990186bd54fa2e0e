# File Chain (see DEVELOPER.md):
# Doc Version: v1.0.0
#
"""
Levelstyle Main Entry Point - Demo CLI and Logging Bootstrap

PURPOSE:
    Entry point for the levelstyle CLI tool. Loads the formatter
    configuration and logs one message per severity level to stderr, so
    the configured styles can be checked in a terminal.

WHO READS ME:
    - Users: via CLI command `levelstyle` or `python -m levelstyle`

WHO I READ:
    - config.py: Configuration loading and defaults
    - models.py: LevelstyleError, SeverityLevel, register_levels()
    - colorlog.py: StyleFormatter for the application's own log output

DEPENDENCIES:
    - argparse: CLI argument parsing
    - logging: Application logging
    - os: LOG_LEVEL environment default

KEY EXPORTS:
    - main(): Application entry point
    - create_argparser(): Creates and configures the argument parser
    - setup_logging(): Root logger setup with the color formatter
    - channel_logger(): Logger with its own stderr handler and formatter

FLOW:
    1. Parse CLI arguments (create_argparser)
    2. Register the extra level names, set up logging
    3. Load configuration from levelstyle.toml (or defaults), optionally write it
    4. Build and validate the StyleFormatter
    5. Log one message per level on the channel logger
"""

import argparse
import logging
import os

import levelstyle
from levelstyle.colorlog import StyleFormatter
from levelstyle.config import Config
from levelstyle.models import LevelstyleError, SeverityLevel, register_levels

_LOGGER = logging.getLogger(__name__)


def create_argparser(parser_class=argparse.ArgumentParser):
    """create the argparser for levelstyle"""
    parser = parser_class(
        prog=levelstyle.__name__, description=levelstyle.__description__
    )
    config_settings = parser.add_argument_group("configuration")

    config_settings.add_argument(
        "-c",
        "--config",
        dest="configfile",
        help="Use the configuration from this file, defaults to %(default)s",
        default="levelstyle.toml",
    )
    config_settings.add_argument(
        "-w",
        "--write",
        dest="writeconfig",
        action="store_true",
        help="Write the configuration to a file and exit",
        default=False,
    )
    config_settings.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {levelstyle.__version__}",
    )
    config_settings.add_argument(
        "-l",
        "--loglevel",
        type=str,
        default=os.environ.get("LOG_LEVEL", "DEBUG"),
        help=f"{', '.join(level.name for level in SeverityLevel)}, defaults to %(default)s",
    )

    parser.add_argument(
        "-n",
        "--channel",
        type=str,
        default="CLIENT",
        help='Logger name shown in each line, default "%(default)s"',
    )
    parser.add_argument(
        "-m",
        "--message",
        type=str,
        default="{level} message",
        help='Message to log, {level} is replaced by the level name, default "%(default)s"',
    )
    return parser


def get_log_level(level_name: str) -> tuple[int, bool]:
    if level_name.upper() == "NOTSET":
        return logging.NOTSET, False
    try:
        return SeverityLevel.from_name(level_name), False
    except LevelstyleError:
        return logging.WARNING, True


def setup_logging(loglevel: str):
    """sets up the logging, takes the given loglevel and uses the custom,
    colorful log formatter
    """
    logging.basicConfig(level=logging.WARN)
    level, unknown_loglevel = get_log_level(loglevel)
    logging.root.setLevel(level)
    custom_formatter = StyleFormatter()
    for handler in logging.root.handlers:
        handler.setFormatter(custom_formatter)
    if unknown_loglevel:
        _LOGGER.warning("Unknown log level: %s", loglevel.upper())
    return level


def channel_logger(name: str, level: int, formatter: logging.Formatter) -> logging.Logger:
    """return the named logger writing to stderr through the formatter only"""
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


def main(argv=None):
    """main function, returns 0 on success, 1 otherwise"""
    parser = create_argparser()
    args = parser.parse_args(argv)
    register_levels()
    level = setup_logging(args.loglevel)

    cfg = Config.load(args.configfile)
    if args.writeconfig:
        cfg.save(args.configfile)
        return 0

    retval = 0
    try:
        formatter = cfg.formatter()
        # handlers report format errors themselves, check before logging
        formatter.validate()
        logger = channel_logger(args.channel, level, formatter)
        for severity in SeverityLevel:
            logger.log(severity, args.message.replace("{level}", severity.name.lower()))
    except LevelstyleError as exc:
        _LOGGER.error(exc)
        retval = 1
    return retval


if __name__ == "__main__":
    raise SystemExit(main())
