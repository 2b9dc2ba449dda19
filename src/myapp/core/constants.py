#!/usr/bin/env python3
"""
Core constants used across myapp.

- Identity: program name, version and the embedded long description.
- Server defaults: bind address and port used by the `server` command.
- Value ranges: bounds for the integer value types accepted by the grammar.
- Regular expressions: compiled patterns used by the grammar validators.
"""

import re
from typing import Final

# --- Program identity --- #

APP_NAME: Final[str] = "myapp"

# Kept in sync with pyproject.toml
APP_VERSION: Final[str] = "0.1.0"

APP_ABOUT: Final[str] = "Example CLI with nested subcommands and man page generation"

# Longer description used for `--help` and the top-level man page
APP_LONG_ABOUT: Final[str] = """\
myapp is a tiny example CLI demonstrating auto-generated man pages.

It showcases:
    - Nested subcommands (e.g., `config get`, `config set`)
    - Rich help/usage text derived from a single source of truth
    - Man page generation to `target/man/` via `myapp-docs man`

Top-level commands:
    - config: manage configuration values (get/set)
    - server: run a demo server (addr/port/verbosity)
    - remote: add or remove a remote by name
"""

# Default text encoding
DEFAULT_TEXT_ENCODING: Final[str] = "utf-8"


# --- Server defaults --- #

DEFAULT_SERVER_PORT: Final[int] = 8080
DEFAULT_SERVER_ADDR: Final[str] = "127.0.0.1"


# --- Value ranges --- #

U16_MIN: Final[int] = 0
U16_MAX: Final[int] = 65535


# --- Regular Expressions --- #
# Matches strict SemVer strings (e.g., 1.2.3 only)
STRICT_SEMVER_RE: re.Pattern[str] = re.compile(r"^\d+\.\d+\.\d+$")

# Command names: lowercase letter first, then lowercase letters, digits, hyphens
COMMAND_NAME_ALLOWED_RE: re.Pattern[str] = re.compile(r"^[a-z][a-z0-9-]*$")

# Argument names double as Python identifiers on the parsed namespace
ARGUMENT_NAME_ALLOWED_RE: re.Pattern[str] = re.compile(r"^[a-z_][a-z0-9_]*$")

# Long flags: `--` followed by a command-like name
LONG_FLAG_RE: re.Pattern[str] = re.compile(r"^--[a-z][a-z0-9-]*$")

# Short flags: a single dash and a single alphanumeric character
SHORT_FLAG_RE: re.Pattern[str] = re.compile(r"^-[A-Za-z0-9]$")

# Integer tokens: optional sign, then ASCII digits only (`int()` is looser)
INT_TOKEN_RE: re.Pattern[str] = re.compile(r"^[+-]?[0-9]+$")


# --- Runtime guard --- #
def validate_constants():
    """
    Ensure constants are valid at runtime.
    """
    if not STRICT_SEMVER_RE.fullmatch(APP_VERSION):
        raise RuntimeError(
            f"APP_VERSION must be strict semver (x.y.z), got {APP_VERSION!r}"
        )
    if not U16_MIN <= DEFAULT_SERVER_PORT <= U16_MAX:
        raise RuntimeError(
            f"DEFAULT_SERVER_PORT must fit in {U16_MIN}..{U16_MAX}, got {DEFAULT_SERVER_PORT}"
        )

validate_constants()
