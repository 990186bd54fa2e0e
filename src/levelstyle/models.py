"""
File Chain (see DEVELOPER.md):
Doc Version: v1.0.0

- Called by: palette.py, colorlog.py, config.py, main.py
- Purpose: Core data types and error classes

Levelstyle Data Models - Severity Levels, Style Rules and Errors

PURPOSE:
    Defines the severity levels a record can carry, the per-level style rule
    and the error hierarchy raised by the formatter.

WHO READS ME:
    - palette.py: Builds the default style map from SeverityLevel/StyleRule
    - colorlog.py: Raises ConfigurationError and ValidationError
    - config.py: Converts TOML style tables into StyleRule
    - main.py: Uses LevelstyleError for exception handling

WHO I READ:
    - None (leaf module, no internal dependencies)

DEPENDENCIES:
    - enum: IntEnum for ordered severity levels
    - dataclasses: @dataclass decorator
    - logging: addLevelName() for the extra levels

KEY EXPORTS:
    - LevelstyleError: Base exception class for all levelstyle errors
    - ConfigurationError: Style map has no rule for a level, unknown level name
    - ValidationError: Unknown color or option name in a style rule
    - SeverityLevel: Ordered severity enumeration (DEBUG .. EMERGENCY)
    - StyleRule: Foreground, background and options for one level
    - register_levels(): Makes NOTICE, ALERT and EMERGENCY known to logging

SEVERITY LEVELS:
    DEBUG=10, INFO=20, NOTICE=25, WARNING=30, ERROR=40, CRITICAL=50,
    ALERT=55, EMERGENCY=60
    The stdlib levels keep their logging module values.
"""

import logging
from dataclasses import dataclass
from enum import IntEnum


class LevelstyleError(Exception):
    """Base class for all errors raised by levelstyle"""


class ConfigurationError(LevelstyleError):
    """the style map or configuration can not serve a level"""


class ValidationError(LevelstyleError, ValueError):
    """a style rule references an unknown color or option"""


class SeverityLevel(IntEnum):
    """ordered log severity, compatible with the logging module levels"""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    NOTICE = 25
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL
    ALERT = 55
    EMERGENCY = 60

    @classmethod
    def from_name(cls, name: str) -> "SeverityLevel":
        """resolve a level name, case does not matter and WARN is WARNING"""
        key = name.strip().upper()
        if key == "WARN":
            key = "WARNING"
        try:
            return cls[key]
        except KeyError:
            raise ConfigurationError(
                f'unknown level "{name}". Expected one of '
                f"({', '.join(level.name for level in cls)})"
            ) from None


def register_levels():
    """register the levels logging does not know about with their names"""
    for level in (SeverityLevel.NOTICE, SeverityLevel.ALERT, SeverityLevel.EMERGENCY):
        logging.addLevelName(level, level.name)


@dataclass(frozen=True)
class StyleRule:
    """terminal rendering for one level, every attribute is optional"""

    foreground: str | None = None
    background: str | None = None
    options: tuple[str, ...] = ()
