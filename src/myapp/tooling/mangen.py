#!/usr/bin/env python3
"""
Man page generator.

Renders one roff manual page per command in a CommandSpec tree (the root and
every nested subcommand) through a Jinja2 template. Page names follow the
usual `myapp-config-get.1` convention and cross-reference each other in the
SUBCOMMANDS section.

Typical entry point:
    generate_man_pages(build_grammar(), Path("target/man"))
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from myapp.core.constants import DEFAULT_TEXT_ENCODING
from myapp.core.grammar.arg_kind import ArgKind
from myapp.core.grammar.argument_spec import ArgumentSpec
from myapp.core.grammar.command_spec import CommandPath, CommandSpec

logger = logging.getLogger(__name__)

TEMPLATES_ROOT = Path(__file__).resolve().parent / "templates"
MAN_TEMPLATE = "man.j2"
DEFAULT_SECTION = "1"


# --- roff helpers --- #

def roff_escape(text: Any) -> str:
    """
    Escape text for roff: backslashes and hyphens, and control characters
    ('.' or "'") at the start of a line.
    """
    s = str(text).replace("\\", "\\e").replace("-", "\\-")
    lines = []
    for line in s.split("\n"):
        if line.startswith((".", "'")):
            line = "\\&" + line
        lines.append(line)
    return "\n".join(lines)


def bold(text: Any) -> str:
    return f"\\fB{roff_escape(text)}\\fR"


def italic(text: Any) -> str:
    return f"\\fI{roff_escape(text)}\\fR"


# --- Page model --- #

def page_name(root: CommandSpec, path: CommandPath) -> str:
    """`myapp` for the root, `myapp-config-get` for ('config', 'get')."""
    return "-".join((root.name, *path))


def _option_spelling(arg: ArgumentSpec) -> str:
    if arg.kind == ArgKind.POSITIONAL:
        return f"<{italic(arg.display_metavar())}>"
    spelled = ", ".join(bold(f) for f in arg.flags())
    if arg.kind.takes_value():
        spelled += f"={italic(arg.display_metavar())}"
    return spelled


def _synopsis_token(arg: ArgumentSpec) -> str:
    if arg.kind == ArgKind.POSITIONAL:
        return f"<{italic(arg.display_metavar())}>"
    token = f"[{'|'.join(bold(f) for f in arg.flags())}]"
    return token + "..." if arg.kind == ArgKind.COUNT else token


def _page_context(root: CommandSpec, path: CommandPath, spec: CommandSpec, section: str) -> Dict[str, Any]:
    is_root = not path
    options: List[Dict[str, Any]] = [{"spelling": f"{bold('-h')}, {bold('--help')}", "help": "Print help", "choices": []}]
    synopsis = [bold(" ".join((root.name, *path))), f"[{bold('-h')}|{bold('--help')}]"]

    if is_root and root.version:
        options.append({"spelling": f"{bold('-V')}, {bold('--version')}", "help": "Print version", "choices": []})
        synopsis.append(f"[{bold('-V')}|{bold('--version')}]")

    for arg in spec.arguments:
        help_text = arg.help
        if arg.has_default():
            help_text = f"{help_text} [default: {arg.default}]"
        options.append({
            "spelling": _option_spelling(arg),
            "help": help_text,
            "choices": list(arg.choices or []),
        })
        synopsis.append(_synopsis_token(arg))

    if spec.subcommands:
        synopsis.append(f"<{italic('subcommands')}>")

    subcommands = [
        {"ref": f"{page_name(root, path + (sub.name,))}({section})", "about": sub.about}
        for sub in spec.subcommands
    ]

    return {
        "title": page_name(root, path),
        "section": section,
        "footer": f"{root.name} {root.version}" if root.version else root.name,
        "name": page_name(root, path),
        "about": spec.about,
        "synopsis": " ".join(synopsis),
        "description": spec.long_about.strip() if spec.long_about else None,
        "options": options,
        "subcommands": subcommands,
        "version": root.version if is_root else None,
    }


# --- Rendering --- #

def _build_env(templates_roots: Iterable[Path]) -> Environment:
    loader = FileSystemLoader([str(Path(p).resolve()) for p in templates_roots])
    env = Environment(
        loader=loader,
        autoescape=select_autoescape(enabled_extensions=("html", "xml")),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )
    env.filters["roff"] = roff_escape
    return env


class ManRenderer:
    """Holds a Jinja Environment and renders pages for a grammar tree."""

    def __init__(self, templates_roots: Optional[Iterable[Path]] = None):
        self.env = _build_env(templates_roots or [TEMPLATES_ROOT])

    def render(self, root: CommandSpec, path: CommandPath = (), section: str = DEFAULT_SECTION) -> str:
        spec = root.find(path)
        template = self.env.get_template(MAN_TEMPLATE)
        return template.render(page=_page_context(root, tuple(path), spec, section))


def generate_man_pages(
    grammar: CommandSpec,
    out_dir: Path,
    section: str = DEFAULT_SECTION,
    templates_roots: Optional[Iterable[Path]] = None,
) -> List[Path]:
    """
    Render a page for every command in `grammar` into `out_dir`.

    Returns:
        Written paths, root first, in tree (depth-first) order.

    Raises:
        OSError: if the directory or a page cannot be written.
        jinja2.TemplateNotFound: if `templates_roots` lacks `man.j2`.
    """
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    renderer = ManRenderer(templates_roots)

    written: List[Path] = []
    for path, _spec in grammar.walk():
        target = out_dir / f"{page_name(grammar, path)}.{section}"
        target.write_text(renderer.render(grammar, path, section), encoding=DEFAULT_TEXT_ENCODING)
        logger.debug("wrote %s", target)
        written.append(target)

    logger.info("Generated %d man pages to %s", len(written), out_dir)
    return written
