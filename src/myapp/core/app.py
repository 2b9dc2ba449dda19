#!/usr/bin/env python3
"""
Purpose:
    Provides a module-level accessor for the myapp AppContext, with optional
    reload and overrides for configuration and grammar.
"""
from typing import Optional, Dict, Any

from myapp.core.app_context import AppContext, build_context
from myapp.core.grammar.command_spec import CommandSpec

# --- Module state --- #

_CTX: Optional[AppContext] = None


# --- Public API --- #

def get_context(
    *,
    force_reload: bool = False,
    config_override: Optional[Dict[str, Any]] = None,
    grammar_override: Optional[CommandSpec] = None,
) -> AppContext:
    """
    Return the process-wide `AppContext`.

    Args:
        force_reload:
            If True, rebuilds the context even if one is already cached.
        config_override:
            Optional configuration dict to use instead of `load_config()`.
        grammar_override:
            Optional command tree to use instead of `build_grammar()`.

    Returns:
        A loaded `AppContext` instance.
    """
    global _CTX
    if _CTX is None or force_reload or config_override or grammar_override:
        _CTX = build_context(config=config_override, grammar=grammar_override)
    return _CTX
