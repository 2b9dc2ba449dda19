#!/usr/bin/env python3
from pathlib import Path

from jinja2 import TemplateError

from myapp.core.app_context import AppContext
from myapp.tooling.mangen import DEFAULT_SECTION, generate_man_pages


def register(subparsers):
    sp = subparsers.add_parser("man", help="Generate man pages for every command")
    sp.add_argument("--out-dir", help="Output directory (default: config man.out_dir)")
    sp.add_argument("--section", help=f"Manual section (default: config man.section or {DEFAULT_SECTION})")
    sp.set_defaults(func=generate_man)


def generate_man(args, ctx: AppContext) -> int:
    man_cfg = ctx.config.get("man", {})
    out_dir = Path(args.out_dir or man_cfg.get("out_dir", "target/man"))
    section = str(args.section or man_cfg.get("section", DEFAULT_SECTION))

    try:
        written = generate_man_pages(ctx.grammar, out_dir, section=section)
    except (OSError, TemplateError) as e:
        print(f"Error generating man pages:\n  {e}")
        return 1

    print(f"Generated {len(written)} man pages to {out_dir.resolve()}")
    for p in written:
        print(f"  - {p.name}")
    return 0
