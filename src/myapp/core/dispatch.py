#!/usr/bin/env python3
"""
Purpose:
    Maps a parsed `TopCommand` to the single acknowledgment line describing
    the action that would be taken. No configuration is stored, no server is
    started and no remote is touched.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from myapp.core.commands import (
    ConfigCommand,
    ConfigGet,
    ConfigSet,
    RemoteCommand,
    ServerCommand,
    TopCommand,
)

logger = logging.getLogger(__name__)


def describe(command: TopCommand) -> str:
    """
    Return the acknowledgment line for `command`.

    Raises:
        TypeError: if `command` is not a `TopCommand` variant.
    """
    if isinstance(command, ServerCommand):
        return f"server start on {command.addr}:{command.port} (verbosity: {command.verbose})"

    if isinstance(command, RemoteCommand):
        # remove wins over url
        if command.remove:
            return f"remote removed: {command.name}"
        if command.url is not None:
            return f"remote added: {command.name} -> {command.url}"
        return f"remote info requested: {command.name}"

    if isinstance(command, ConfigCommand):
        action = command.action
        if isinstance(action, ConfigGet):
            return f"config get {action.key} (format: {action.format.label})"
        if isinstance(action, ConfigSet):
            return f"config set {action.key}={action.value} (global: {_bool(action.global_)})"
        raise TypeError(f"Unsupported config action: {type(action).__name__}")

    raise TypeError(f"Unsupported command: {type(command).__name__}")


def dispatch(command: TopCommand, stream: Optional[TextIO] = None) -> None:
    """Write the acknowledgment line for `command` to `stream` (stdout by default)."""
    line = describe(command)
    logger.debug("dispatching %s", type(command).__name__)
    print(line, file=stream or sys.stdout)


def _bool(value: bool) -> str:
    return "true" if value else "false"
