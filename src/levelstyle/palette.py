"""
File Chain (see DEVELOPER.md):
Doc Version: v1.0.0

- Called by: colorlog.py, config.py
- Purpose: ANSI SGR code tables and the default level style map

Levelstyle Palette - Fixed Color/Option Tables

PURPOSE:
    Maps the closed color and option vocabularies to their ANSI SGR
    (set, unset) code pairs, and defines the style used for each level
    when the caller does not override it.

WHO READS ME:
    - colorlog.py: Looks up codes while composing escape sequences
    - config.py: Uses DEFAULT_STYLE_MAP for the default configuration

WHO I READ:
    - models.py: SeverityLevel, StyleRule

DEPENDENCIES:
    - types: MappingProxyType for read-only tables

KEY EXPORTS:
    - FOREGROUND_COLORS: color name -> (set, unset), 30-37 / 39
    - BACKGROUND_COLORS: color name -> (set, unset), 40-47 / 49
    - OPTIONS: option name -> (set, unset)
    - DEFAULT_STYLE_MAP: SeverityLevel -> StyleRule

COLOR SCHEME:
    - DEBUG: White on cyan
    - INFO: Green
    - NOTICE: Yellow
    - WARNING: Bold yellow
    - ERROR: White on red
    - CRITICAL, ALERT: Bold white on red
    - EMERGENCY: Underscored white on red
"""

from types import MappingProxyType

from levelstyle.models import SeverityLevel, StyleRule

_COLORS = ("black", "red", "green", "yellow", "blue", "magenta", "cyan", "white")

FOREGROUND_COLORS = MappingProxyType(
    {name: (30 + offset, 39) for offset, name in enumerate(_COLORS)}
)
BACKGROUND_COLORS = MappingProxyType(
    {name: (40 + offset, 49) for offset, name in enumerate(_COLORS)}
)
OPTIONS = MappingProxyType(
    {
        "bold": (1, 22),
        "underscore": (4, 24),
        "blink": (5, 25),
        "reverse": (7, 27),
        "conceal": (8, 28),
    }
)

DEFAULT_STYLE_MAP = MappingProxyType(
    {
        SeverityLevel.DEBUG: StyleRule("white", "cyan"),
        SeverityLevel.INFO: StyleRule("green"),
        SeverityLevel.NOTICE: StyleRule("yellow"),
        SeverityLevel.WARNING: StyleRule("yellow", options=("bold",)),
        SeverityLevel.ERROR: StyleRule("white", "red"),
        SeverityLevel.CRITICAL: StyleRule("white", "red", ("bold",)),
        SeverityLevel.ALERT: StyleRule("white", "red", ("bold",)),
        SeverityLevel.EMERGENCY: StyleRule("white", "red", ("underscore",)),
    }
)
