#!/usr/bin/env python3

import sys
from typing import Optional, Sequence

from myapp.core.app import get_context
from myapp.core.dispatch import dispatch
from myapp.core.grammar.parser import parse_command
from myapp.core.log import configure_logging


def main(argv: Optional[Sequence[str]] = None) -> int:
    ctx = get_context()  # built once
    configure_logging(ctx.config)

    # exits with status 2 on a grammar violation, before anything is printed
    command = parse_command(argv, ctx.grammar)
    dispatch(command)
    return 0


if __name__ == "__main__":
    sys.exit(main())
