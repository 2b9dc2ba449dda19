#!/usr/bin/env python3

import argparse
import sys
from typing import Optional, Sequence

from myapp.core.app import get_context
from myapp.core.log import configure_logging
from myapp.cli import grammar, man


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="myapp-docs", description="Documentation tooling for myapp")
    subparsers = parser.add_subparsers(dest="command")

    # Register subcommands (they accept ctx)
    man.register(subparsers)
    grammar.register(subparsers)

    args = parser.parse_args(argv)
    if hasattr(args, "func"):
        ctx = get_context()
        configure_logging(ctx.config)
        return args.func(args, ctx)
    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
