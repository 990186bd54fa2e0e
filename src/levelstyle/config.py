"""
File Chain (see DEVELOPER.md):
Doc Version: v1.0.0

- Called by: main.py
- Purpose: Configuration loading and defaults management

Levelstyle Configuration - Formatter Settings from TOML

PURPOSE:
    Manages configuration loading from TOML files and provides defaults
    for the style formatter: the line template, the date format, the
    line break policy and per-level style overrides.

WHO READS ME:
    - main.py: Loads configuration via Config.load() during bootstrap

WHO I READ:
    - models.py: SeverityLevel, StyleRule
    - palette.py: DEFAULT_STYLE_MAP for the default styles table
    - colorlog.py: LineRenderer.default_format, StyleFormatter

DEPENDENCIES:
    - serde: TOML serialization/deserialization (@deserialize, @serialize)
    - serde.toml: from_toml(), to_toml()
    - dataclasses: @dataclass decorator
    - logging: Configuration loading status messages

KEY EXPORTS:
    - StyleSettings: One [styles.LEVEL] table
    - Config: Dataclass containing all configuration parameters

METHODS:
    - load(filename): Load configuration from TOML file, fall back to defaults
    - save(filename): Save current configuration to TOML file
    - style_overrides(): styles table as a level -> StyleRule map
    - formatter(): StyleFormatter built from this configuration

FILE FORMAT:
    levelstyle.toml example:
    ```toml
    line_format = "%(name)s: %(message)s [%(asctime)s]"
    date_format = "%Y-%m-%d %H:%M:%S"
    allow_inline_line_breaks = false

    [styles.ERROR]
    foreground = "white"
    background = "red"
    options = ["bold"]
    ```
    Level names are matched case-insensitively. Style names are checked
    only when a record of that level is formatted.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from serde import SerdeError, deserialize, field, serialize
from serde.toml import from_toml, to_toml

from levelstyle.colorlog import LineRenderer, StyleFormatter
from levelstyle.models import SeverityLevel, StyleRule
from levelstyle.palette import DEFAULT_STYLE_MAP

_LOGGER = logging.getLogger(__name__)


@deserialize
@serialize
@dataclass
class StyleSettings:
    """style table of one level"""

    foreground: Optional[str] = field(default=None, skip_if_default=True)
    background: Optional[str] = field(default=None, skip_if_default=True)
    options: list[str] = field(default_factory=list)

    @classmethod
    def from_rule(cls, rule: StyleRule) -> "StyleSettings":
        return cls(rule.foreground, rule.background, list(rule.options))

    def to_rule(self) -> StyleRule:
        return StyleRule(self.foreground, self.background, tuple(self.options))


def _default_styles() -> dict[str, StyleSettings]:
    return {
        level.name: StyleSettings.from_rule(rule)
        for level, rule in DEFAULT_STYLE_MAP.items()
    }


@deserialize
@serialize
@dataclass
class Config:
    """style formatter configuration"""

    line_format: str = LineRenderer.default_format
    date_format: str = LineRenderer.default_date_format
    allow_inline_line_breaks: bool = False
    styles: dict[str, StyleSettings] = field(default_factory=_default_styles)

    @classmethod
    def load(cls, filename: str) -> "Config":
        """load the configuration from the given file"""
        try:
            with open(filename, encoding="utf-8") as handle:
                cfg = from_toml(cls, handle.read())
            _LOGGER.info("Configuration loaded from file %s", filename)
        except (FileNotFoundError, TypeError, ValueError, SerdeError) as exc:
            if not isinstance(exc, FileNotFoundError):
                _LOGGER.error(exc)
            cfg = cls()
            _LOGGER.warning("using configuration defaults")
        return cfg

    def save(self, filename: str):
        """save the configuration to the given file"""
        with open(filename, "w+", encoding="utf-8") as handle:
            handle.write(to_toml(self))

    def style_overrides(self) -> dict[SeverityLevel, StyleRule]:
        """the styles table keyed by level, unknown level names raise"""
        return {
            SeverityLevel.from_name(name): settings.to_rule()
            for name, settings in self.styles.items()
        }

    def formatter(self) -> StyleFormatter:
        return StyleFormatter(
            self.style_overrides(),
            self.line_format,
            self.date_format,
            self.allow_inline_line_breaks,
        )
