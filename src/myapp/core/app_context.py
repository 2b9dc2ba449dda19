#!/usr/bin/env python3
"""
Purpose:
    Wires together the myapp application context: the merged configuration
    and the command grammar shared by the parser and the docs tooling.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from myapp.core.config import load_config
from myapp.core.grammar.command_spec import CommandSpec
from myapp.core.grammar.declaration import build_grammar


# --- Data model --- #

@dataclass(frozen=True)
class AppContext:
    """Immutable container for configuration and the command grammar."""
    config: Dict[str, Any]
    grammar: CommandSpec


# --- Factory --- #

def build_context(
    *,
    config: Optional[Dict[str, Any]] = None,
    grammar: Optional[CommandSpec] = None,
) -> AppContext:
    """
    Build an `AppContext`.

    Args:
        config:
            Pre-merged configuration. If omitted, `load_config()` is used.
        grammar:
            Command tree. If omitted, `build_grammar()` is used.

    Returns:
        AppContext: immutable bundle of config and grammar.
    """
    cfg = config if config is not None else load_config()
    return AppContext(config=cfg, grammar=grammar or build_grammar())
