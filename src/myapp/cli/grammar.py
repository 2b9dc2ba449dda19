#!/usr/bin/env python3
from pathlib import Path

from myapp.core.app_context import AppContext
from myapp.core.constants import DEFAULT_TEXT_ENCODING
from myapp.tooling.grammar_dump import SUPPORTED_FORMATS, dump_grammar


def register(subparsers):
    sp = subparsers.add_parser("grammar", help="Print the command grammar")
    sp.add_argument("--format", choices=list(SUPPORTED_FORMATS), default="yaml", help="Output format")
    sp.add_argument("--output", help="Write to this file instead of stdout")
    sp.set_defaults(func=show_grammar)


def show_grammar(args, ctx: AppContext) -> int:
    text = dump_grammar(ctx.grammar, args.format)
    if not args.output:
        print(text, end="")
        return 0

    out = Path(args.output)
    try:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(text, encoding=DEFAULT_TEXT_ENCODING)
    except OSError as e:
        print(f"Error writing grammar:\n  {e}")
        return 1
    print(f"Wrote grammar to {out}")
    return 0
