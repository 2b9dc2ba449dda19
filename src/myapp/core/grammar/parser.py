#!/usr/bin/env python3
"""
Purpose:
    Builds an argparse parser from a CommandSpec tree and turns argv into a
    typed `TopCommand`. Grammar violations (unknown or missing subcommand,
    missing positional, malformed or out-of-range value) go through
    argparse's `error()`: usage on stderr, exit status 2, nothing on stdout.
"""
from __future__ import annotations

import argparse
import logging
from typing import Callable, Dict, Optional, Sequence

from pydantic import ValidationError

from myapp.core import constants as C
from myapp.core.commands import TopCommand, build_command
from myapp.core.formatting import format_validation_errors
from myapp.core.grammar.arg_kind import ArgKind, ValueType
from myapp.core.grammar.argument_spec import ArgumentSpec
from myapp.core.grammar.command_spec import CommandPath, CommandSpec
from myapp.core.grammar.declaration import build_grammar
from myapp.core.utils import is_u16

logger = logging.getLogger(__name__)

# Namespace attribute holding the path of the selected leaf command
COMMAND_PATH_DEST = "command_path"


# --- Value coercion --- #

def parse_u16(token: str) -> int:
    """argparse `type=` callable for unsigned 16-bit integers."""
    if not C.INT_TOKEN_RE.fullmatch(token):
        raise argparse.ArgumentTypeError(f"invalid integer value: {token!r}")
    value = int(token, 10)
    if not is_u16(value):
        raise argparse.ArgumentTypeError(f"{value} is not in {C.U16_MIN}..{C.U16_MAX}")
    return value


VALUE_TYPES: Dict[ValueType, Callable[[str], object]] = {
    ValueType.STRING: str,
    ValueType.U16: parse_u16,
}


# --- Parser construction --- #

def build_parser(grammar: CommandSpec) -> argparse.ArgumentParser:
    """Return an `ArgumentParser` mirroring `grammar` (root plus nested subparsers)."""
    parser = argparse.ArgumentParser(
        prog=grammar.name,
        description=grammar.long_about or grammar.about,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    if grammar.version:
        parser.add_argument(
            "-V", "--version",
            action="version",
            version=f"{grammar.name} {grammar.version}",
            help="Print version",
        )
    _populate(parser, grammar, ())
    return parser


def _populate(parser: argparse.ArgumentParser, spec: CommandSpec, path: CommandPath) -> None:
    for arg in spec.arguments:
        _add_argument(parser, arg)

    if spec.is_leaf:
        parser.set_defaults(**{COMMAND_PATH_DEST: path})
        return

    subparsers = parser.add_subparsers(
        dest="_".join(path + ("command",)),
        metavar="<command>",
        required=True,
    )
    for sub in spec.subcommands:
        _register(subparsers, sub, path + (sub.name,))


def _register(subparsers: argparse._SubParsersAction, spec: CommandSpec, path: CommandPath) -> None:
    sp = subparsers.add_parser(
        spec.name,
        help=spec.about,
        description=spec.long_about or spec.about,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    _populate(sp, spec, path)


def _add_argument(parser: argparse.ArgumentParser, arg: ArgumentSpec) -> None:
    help_text = arg.help
    if arg.has_default():
        help_text = f"{help_text} [default: {arg.default}]"

    if arg.kind == ArgKind.POSITIONAL:
        parser.add_argument(
            arg.name,
            metavar=arg.display_metavar(),
            type=VALUE_TYPES[arg.value_type],
            help=help_text,
        )
    elif arg.kind == ArgKind.OPTION:
        parser.add_argument(
            *arg.flags(),
            dest=arg.name,
            # with choices, argparse shows {a,b} instead of a placeholder
            metavar=None if arg.choices else arg.display_metavar(),
            type=VALUE_TYPES[arg.value_type],
            choices=arg.choices,
            default=arg.default,
            help=help_text,
        )
    elif arg.kind == ArgKind.FLAG:
        parser.add_argument(*arg.flags(), dest=arg.name, action="store_true", help=help_text)
    elif arg.kind == ArgKind.COUNT:
        parser.add_argument(*arg.flags(), dest=arg.name, action="count", default=0, help=help_text)
    else:
        raise ValueError(f"Unsupported argument kind for {arg.name!r}: {arg.kind.value}")


# --- Parsing --- #

def parse_command(
    argv: Optional[Sequence[str]] = None,
    grammar: Optional[CommandSpec] = None,
) -> TopCommand:
    """
    Parse `argv` (defaults to `sys.argv[1:]`) against `grammar`.

    Returns:
        The typed `TopCommand` for the selected leaf command.

    Exits:
        With status 2 through argparse on any grammar violation.
    """
    grammar = grammar or build_grammar()
    parser = build_parser(grammar)
    args = parser.parse_args(argv)

    path = tuple(getattr(args, COMMAND_PATH_DEST))
    leaf = grammar.find(path)
    values = {a.name: getattr(args, a.name) for a in leaf.arguments}
    logger.debug("parsed %r with %r", " ".join(path), values)

    try:
        return build_command(path, values)
    except LookupError as e:
        # a custom grammar can declare a leaf with no typed value behind it
        parser.error(str(e))
    except ValidationError as e:
        labels = {a.name: "/".join(a.flags()) or a.display_metavar() for a in leaf.arguments}
        parser.error("; ".join(format_validation_errors(e, labels)))
