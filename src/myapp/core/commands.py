#!/usr/bin/env python3
"""
Purpose:
    Typed, immutable command values produced by a successful parse. These
    models know nothing about the grammar objects; the parser hands them a
    plain `{argument name: value}` mapping per leaf command.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Type, Union

from pydantic import BaseModel, ConfigDict, Field

from myapp.core import constants as C


class OutputFormat(str, Enum):
    """Output format accepted by `config get --format`."""

    PLAIN = "plain"
    JSON = "json"

    @property
    def label(self) -> str:
        """Display name used in acknowledgments (`Plain`, `Json`)."""
        return self.name.capitalize()


class _CommandValue(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


# --- config --- #

class ConfigGet(_CommandValue):
    key: str
    format: OutputFormat = OutputFormat.PLAIN


class ConfigSet(_CommandValue):
    key: str
    value: str
    # `global` is a keyword; exposed under its grammar name via the alias
    global_: bool = Field(default=False, alias="global")


ConfigAction = Union[ConfigGet, ConfigSet]


class ConfigCommand(_CommandValue):
    action: ConfigAction


# --- server / remote --- #

class ServerCommand(_CommandValue):
    port: int = Field(default=C.DEFAULT_SERVER_PORT, ge=C.U16_MIN, le=C.U16_MAX)
    addr: str = C.DEFAULT_SERVER_ADDR
    verbose: int = Field(default=0, ge=0)


class RemoteCommand(_CommandValue):
    name: str
    url: Optional[str] = None
    remove: bool = False


TopCommand = Union[ConfigCommand, ServerCommand, RemoteCommand]


# --- Construction from parsed values --- #

# Leaf command path -> value model
COMMAND_MODELS: Dict[Tuple[str, ...], Type[_CommandValue]] = {
    ("config", "get"): ConfigGet,
    ("config", "set"): ConfigSet,
    ("server",): ServerCommand,
    ("remote",): RemoteCommand,
}


def build_command(path: Sequence[str], values: Mapping[str, Any]) -> TopCommand:
    """
    Build the `TopCommand` for a leaf command path from its parsed values.

    Raises:
        LookupError: if no value model is registered for `path`.
        pydantic.ValidationError: if the values do not fit the model.
    """
    key = tuple(path)
    model = COMMAND_MODELS.get(key)
    if model is None:
        raise LookupError(f"No command registered for {' '.join(key)!r}")

    leaf = model.model_validate(dict(values))
    if key[0] == "config":
        return ConfigCommand(action=leaf)
    return leaf
