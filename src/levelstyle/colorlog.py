"""
File Chain (see DEVELOPER.md):
Doc Version: v1.0.0

- Called by: main.py, config.py, library users
- Purpose: ANSI color-coded log formatter for console output

Levelstyle Color Log Formatter - ANSI Color-Coded Level Tags

PURPOSE:
    Provides color-coded log output for better readability in terminal.
    The record is rendered to a plain line first, then a "[LEVEL]" tag
    wrapped in ANSI escape codes is put in front of it. The codes come from
    the style rule configured for the record's level.

WHO READS ME:
    - main.py: Uses StyleFormatter for the console log handler
    - config.py: Config.formatter() builds a StyleFormatter

WHO I READ:
    - models.py: ConfigurationError, ValidationError, SeverityLevel, StyleRule
    - palette.py: Code tables and DEFAULT_STYLE_MAP

DEPENDENCIES:
    - logging: Standard library logging.Formatter
    - copy: Shallow record copy for flattened messages

KEY EXPORTS:
    - LineRenderer: logging.Formatter subclass, optional line flattening
    - StyleFormatter: LineRenderer subclass with level tag styling
    - style_codes(rule): (set codes, unset codes) for a style rule
    - check_foreground/check_background/check_option(s): name validation

LOG FORMAT:
    %(name)s: %(message)s [%(asctime)s]
    Example: "\\x1b[37;41m[ERROR]\\x1b[39;49m CLIENT: error message [2026-02-02 13:04:26]"

VALIDATION:
    Style rules are validated when a record of their level is formatted,
    not when the formatter is created. A broken rule for a level that is
    never logged goes unnoticed.
"""

import copy
import logging
from types import MappingProxyType

from levelstyle.models import ConfigurationError, SeverityLevel, StyleRule, ValidationError
from levelstyle.palette import BACKGROUND_COLORS, DEFAULT_STYLE_MAP, FOREGROUND_COLORS, OPTIONS


def _check(kind: str, name: str, table) -> None:
    if name not in table:
        raise ValidationError(
            f'Invalid {kind} specified: "{name}". Expected one of ({", ".join(table)})'
        )


def check_foreground(color: str | None = None) -> None:
    """raises ValidationError unless color is None or a foreground color"""
    if color is not None:
        _check("foreground color", color, FOREGROUND_COLORS)


def check_background(color: str | None = None) -> None:
    """raises ValidationError unless color is None or a background color"""
    if color is not None:
        _check("background color", color, BACKGROUND_COLORS)


def check_option(option: str) -> None:
    _check("option", option, OPTIONS)


def check_options(options) -> None:
    for option in options:
        check_option(option)


def style_codes(rule: StyleRule) -> tuple[list[int], list[int]]:
    """return the SGR set and unset codes of a rule, in emission order

    foreground first, then background, then the options as given
    """
    set_codes: list[int] = []
    unset_codes: list[int] = []
    if rule.foreground is not None:
        check_foreground(rule.foreground)
        set_code, unset_code = FOREGROUND_COLORS[rule.foreground]
        set_codes.append(set_code)
        unset_codes.append(unset_code)
    if rule.background is not None:
        check_background(rule.background)
        set_code, unset_code = BACKGROUND_COLORS[rule.background]
        set_codes.append(set_code)
        unset_codes.append(unset_code)
    check_options(rule.options)
    for option in rule.options:
        set_code, unset_code = OPTIONS[option]
        set_codes.append(set_code)
        unset_codes.append(unset_code)
    return set_codes, unset_codes


def _level_key(level) -> int:
    if isinstance(level, str):
        return SeverityLevel.from_name(level)
    return int(level)


def _as_rule(value) -> StyleRule:
    if isinstance(value, StyleRule):
        return value
    options = value.get("options") or ()
    return StyleRule(
        foreground=value.get("foreground"),
        background=value.get("background"),
        options=(options,) if isinstance(options, str) else tuple(options),
    )


class LineRenderer(logging.Formatter):
    """renders a record to one plain text line

    Unless inline line breaks are allowed, line breaks in the message,
    exception and stack text are replaced by spaces.
    """

    default_format = "%(name)s: %(message)s [%(asctime)s]"
    default_date_format = "%Y-%m-%d %H:%M:%S"

    def __init__(self, fmt=None, datefmt=None, allow_inline_line_breaks=False):
        super().__init__(fmt or self.default_format, datefmt or self.default_date_format)
        self.allow_inline_line_breaks = allow_inline_line_breaks

    @staticmethod
    def flatten(text: str) -> str:
        return text.replace("\r\n", " ").replace("\r", " ").replace("\n", " ")

    def formatMessage(self, record):
        if not self.allow_inline_line_breaks:
            record = copy.copy(record)
            record.message = self.flatten(record.message)
        return super().formatMessage(record)

    def format(self, record):
        if self.allow_inline_line_breaks:
            return super().format(record)
        record.message = record.getMessage()
        if self.usesTime():
            record.asctime = self.formatTime(record, self.datefmt)
        line = self.formatMessage(record)
        if record.exc_info and not record.exc_text:
            record.exc_text = self.formatException(record.exc_info)
        trailers = [record.exc_text]
        if record.stack_info:
            trailers.append(self.formatStack(record.stack_info))
        for text in trailers:
            if text:
                line = f"{line} {self.flatten(text)}"
        return line


class StyleFormatter(LineRenderer):
    """return a formatter that prints a color coded level tag before the line"""

    def __init__(
        self, styles=None, fmt=None, datefmt=None, allow_inline_line_breaks=False
    ):
        super().__init__(fmt, datefmt, allow_inline_line_breaks)
        merged = dict(DEFAULT_STYLE_MAP)
        for level, rule in (styles or {}).items():
            merged[_level_key(level)] = _as_rule(rule)
        self._styles = MappingProxyType(merged)

    @property
    def styles(self):
        """the merged level -> StyleRule map, read-only"""
        return self._styles

    def validate(self):
        """check every configured rule now instead of at first use"""
        for rule in self._styles.values():
            style_codes(rule)

    def format(self, record):
        output = super().format(record)
        rule = self._styles.get(record.levelno)
        if rule is None:
            raise ConfigurationError(
                f"no style rule for level {record.levelname} ({record.levelno})"
            )
        set_codes, unset_codes = style_codes(rule)
        if not set_codes:
            return output
        return "\x1b[{}m[{}]\x1b[{}m {}".format(
            ";".join(map(str, set_codes)),
            record.levelname,
            ";".join(map(str, unset_codes)),
            output,
        )
