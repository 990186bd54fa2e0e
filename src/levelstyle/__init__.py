"""
File Chain (see DEVELOPER.md):
Doc Version: v1.0.0

- Called by: Python import system (when `import levelstyle` is executed), entry_points (CLI commands)
- Reads from: importlib.metadata (package metadata), colorlog.py, config.py, models.py, main.py
- Writes to: None (package initialization only, exports public API)

Purpose: Package initialization for levelstyle. Defines public API exports and
         loads package metadata (__version__, __description__).

Package Structure:
    - colorlog.py: StyleFormatter and LineRenderer
    - palette.py: ANSI code tables and default level styles
    - models.py: Severity levels, style rules, errors
    - config.py: TOML configuration management
    - main.py: CLI entry point and argument parsing

Usage:
    handler = logging.StreamHandler()
    handler.setFormatter(StyleFormatter({"ERROR": StyleRule("red", options=("bold",))}))

Entry Points:
    - levelstyle: CLI command (calls main.main())
    - python -m levelstyle: Direct module execution
"""

import importlib.metadata as importlib_metadata

from .models import (
    ConfigurationError,
    LevelstyleError,
    SeverityLevel,
    StyleRule,
    ValidationError,
    register_levels,
)
from .colorlog import LineRenderer, StyleFormatter
from .config import Config
from .main import main

_metadata = importlib_metadata.metadata("levelstyle")
__version__ = _metadata["Version"]
__description__ = _metadata["Summary"]


__all__ = [
    "Config",
    "ConfigurationError",
    "LevelstyleError",
    "LineRenderer",
    "SeverityLevel",
    "StyleFormatter",
    "StyleRule",
    "ValidationError",
    "main",
    "register_levels",
]
