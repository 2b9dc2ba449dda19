#!/usr/bin/env python3
"""
myapp configuration loader.
"""

import copy
import os
from pathlib import Path
from typing import Any, Dict, Final

from myapp.core.utils import merge_dicts, load_json_file

# --- Defaults & locations --- #

DEFAULT_CONFIG: Final[Dict[str, Any]] = {
    "logging": {"level": "WARNING"},
    "man": {"out_dir": "target/man", "section": "1"},
}

GLOBAL_CONFIG_PATH: Final[Path] = Path.home() / ".config" / "myapp" / "config.json"

PROJECT_CONFIG_NAME: Final[str] = "myapp.json"


# --- Public API --- #

def load_config() -> Dict[str, Any]:
    """
    Load myapp configuration with layered precedence.

    Order:
        1. Built-in defaults
        2. Global config (~/.config/myapp/config.json)
        3. Project config (./myapp.json)
        4. Environment overrides:
           - MYAPP_LOG_LEVEL
           - MYAPP_MAN_DIR (output directory for generated man pages)

    Returns:
        A merged configuration dictionary.
    """
    # 1) start with defaults
    config = copy.deepcopy(DEFAULT_CONFIG)

    # 2) global config
    config = merge_dicts(config, load_json_file(GLOBAL_CONFIG_PATH))

    # 3) project config
    project_path = Path.cwd() / PROJECT_CONFIG_NAME
    config = merge_dicts(config, load_json_file(project_path))

    # 4) environment overrides
    log_level_env = os.getenv("MYAPP_LOG_LEVEL")
    if log_level_env:
        config.setdefault("logging", {})["level"] = log_level_env

    man_dir_env = os.getenv("MYAPP_MAN_DIR")
    if man_dir_env:
        config.setdefault("man", {})["out_dir"] = str(Path(man_dir_env.strip()).expanduser())

    return config
