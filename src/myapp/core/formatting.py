#!/usr/bin/env python3
"""
Formatting helpers for myapp.

- Stable one-line messages for Pydantic v2 `ValidationError`, suitable for
  an argparse `error()` call.
"""
from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional, Sequence


# --- Public API --- #

def format_validation_errors(exc: Exception, labels: Optional[Mapping[str, str]] = None) -> List[str]:
    """
    Return one-line messages from a Pydantic v2 ValidationError.

    `labels` maps a field name to its command-line spelling, so that
    `port: Input should be ...` reads `-p/--port: Input should be ...`.

    Falls back to the first line of str(exc) if `exc.errors()` isn't available.
    """
    errors: Sequence[dict[str, Any]] | None = None

    if callable(getattr(exc, "errors", None)):
        try:
            errors = exc.errors()  # type: ignore[attr-defined]
        except Exception:
            errors = None

    if not errors:
        return [str(exc).splitlines()[0]]

    msgs: List[str] = []
    for err in errors:
        loc = _format_error_loc(err.get("loc", ()), labels or {})
        msgs.append(f"{loc}: {err.get('msg', 'Validation error')}")
    return msgs


# --- Internals --- #

def _format_error_loc(loc: Iterable[Any], labels: Mapping[str, str]) -> str:
    """
    Convert a Pydantic error `loc` tuple into a readable location.

    Examples:
        ('port',) with {'port': '-p/--port'} -> "-p/--port"
        ('action', 'key')                    -> "action.key"
        ()                                   -> "<command>"
    """
    parts = [labels.get(str(seg), str(seg)) for seg in loc]
    return ".".join(parts) if parts else "<command>"
