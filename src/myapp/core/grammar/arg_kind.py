#!/usr/bin/env python3
"""
Purpose:
    Defines the ArgKind and ValueType enumerations used by the command
    grammar, along with helpers for parsing and introspection.
"""

from __future__ import annotations

from enum import Enum


class ArgKind(str, Enum):
    """
    How an argument appears on the command line.

    - positional : bare value, required, matched by position
    - option     : flag followed by a value (`--port 9090`)
    - flag       : presence-only boolean (`--global`)
    - count      : repeatable presence flag counted into an int (`-vv`)
    - invalid    : unrecognized/unsupported kind (returned by `parse`)
    """

    POSITIONAL = "positional"
    OPTION = "option"
    FLAG = "flag"
    COUNT = "count"
    INVALID = "invalid"

    # --- Parsing helpers --- #

    @classmethod
    def parse(cls, value: str | ArgKind | None) -> ArgKind:
        """
        Coerce arbitrary input to an `ArgKind`.

        - `ArgKind` instance → returned as-is
        - `None` or unknown strings → `ArgKind.INVALID`
        - strings are trimmed and lowercased before lookup

        Examples
        --------
        >>> ArgKind.parse(" Flag ")
        <ArgKind.FLAG: 'flag'>
        >>> ArgKind.parse("foo")
        <ArgKind.INVALID: 'invalid'>
        """
        if isinstance(value, ArgKind):
            return value
        if value is None:
            return cls.INVALID
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.INVALID

    # --- Introspection helpers --- #

    def takes_value(self) -> bool:
        """True if a value token is consumed (positional or option)."""
        return self in {ArgKind.POSITIONAL, ArgKind.OPTION}

    def is_switch(self) -> bool:
        """True if the argument is a bare presence switch (flag or count)."""
        return self in {ArgKind.FLAG, ArgKind.COUNT}

    def needs_flag(self) -> bool:
        """True if the argument must be spelled with `-x` and/or `--name`."""
        return self in {ArgKind.OPTION, ArgKind.FLAG, ArgKind.COUNT}


class ValueType(str, Enum):
    """
    Value coercion applied to positional and option tokens.

    - string : passed through unchanged
    - u16    : integer in 0..65535; anything else is a grammar violation
    """

    STRING = "string"
    U16 = "u16"
