#!/usr/bin/env python3
"""
Serialize the command grammar for external documentation tools.

The dump is the plain `CommandSpec.model_dump()` tree, so it can be loaded
back with `CommandSpec.model_validate()`.
"""

import json
from typing import Any, Dict

import yaml

from myapp.core.grammar.command_spec import CommandSpec

SUPPORTED_FORMATS = ("yaml", "json")


def grammar_to_dict(grammar: CommandSpec) -> Dict[str, Any]:
    return grammar.model_dump(mode="json")


def dump_grammar(grammar: CommandSpec, fmt: str = "yaml") -> str:
    """
    Return `grammar` as YAML or JSON text.

    Raises:
        ValueError: for formats other than 'yaml' and 'json'.
    """
    data = grammar_to_dict(grammar)
    fmt = (fmt or "").strip().lower()
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    if fmt == "json":
        return json.dumps(data, indent=2) + "\n"
    raise ValueError(f"Unsupported grammar format: {fmt!r} (expected one of {', '.join(SUPPORTED_FORMATS)})")
