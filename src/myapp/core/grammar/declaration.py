#!/usr/bin/env python3
"""
The myapp command grammar.

This module is the single source of truth for the command tree. The runtime
parser (`myapp.core.grammar.parser`) and the documentation tooling
(`myapp.tooling`) both consume `build_grammar()`; keep it free of imports
from either side.
"""

from myapp.core import constants as C
from myapp.core.grammar.arg_kind import ArgKind, ValueType
from myapp.core.grammar.argument_spec import ArgumentSpec
from myapp.core.grammar.command_spec import CommandSpec

# Literal values accepted by `config get --format`
OUTPUT_FORMAT_CHOICES = ("plain", "json")


def _config_command() -> CommandSpec:
    get_cmd = CommandSpec(
        name="get",
        about="Get a configuration value",
        arguments=[
            ArgumentSpec(name="key", help='Configuration key to read, e.g. "core.editor"'),
            ArgumentSpec(
                name="format",
                kind=ArgKind.OPTION,
                long="--format",
                help="Output format for the value",
                choices=list(OUTPUT_FORMAT_CHOICES),
                default="plain",
            ),
        ],
    )
    set_cmd = CommandSpec(
        name="set",
        about="Set a configuration value",
        arguments=[
            ArgumentSpec(name="key", help='Configuration key to write, e.g. "core.editor"'),
            ArgumentSpec(name="value", help="Value to assign to the key"),
            ArgumentSpec(
                name="global",
                kind=ArgKind.FLAG,
                long="--global",
                help="Write to the global config scope",
            ),
        ],
    )
    return CommandSpec(
        name="config",
        about="Manage configuration values",
        subcommands=[get_cmd, set_cmd],
    )


def _server_command() -> CommandSpec:
    return CommandSpec(
        name="server",
        about="Run the server",
        arguments=[
            ArgumentSpec(
                name="port",
                kind=ArgKind.OPTION,
                short="-p",
                long="--port",
                help="Port to listen on",
                value_type=ValueType.U16,
                default=C.DEFAULT_SERVER_PORT,
            ),
            ArgumentSpec(
                name="addr",
                kind=ArgKind.OPTION,
                long="--addr",
                help="Bind address",
                default=C.DEFAULT_SERVER_ADDR,
            ),
            ArgumentSpec(
                name="verbose",
                kind=ArgKind.COUNT,
                short="-v",
                long="--verbose",
                help="Increase verbosity (-v, -vv)",
            ),
        ],
    )


def _remote_command() -> CommandSpec:
    return CommandSpec(
        name="remote",
        about="Interact with remotes",
        arguments=[
            ArgumentSpec(name="name", help="Remote name"),
            ArgumentSpec(
                name="url",
                kind=ArgKind.OPTION,
                long="--url",
                help="Remote URL (e.g., https://example.com/repo.git)",
            ),
            ArgumentSpec(
                name="remove",
                kind=ArgKind.FLAG,
                long="--remove",
                help="Remove the remote instead of adding",
            ),
        ],
    )


def build_grammar() -> CommandSpec:
    """Return the full `myapp` command tree."""
    return CommandSpec(
        name=C.APP_NAME,
        about=C.APP_ABOUT,
        long_about=C.APP_LONG_ABOUT,
        version=C.APP_VERSION,
        subcommands=[_config_command(), _server_command(), _remote_command()],
    )
