"""Logic for loading and merging configuration files."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from doxymark.deep_merge import deep_merge

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "compounds": {
        "kinds": ["class"],
    },
    "output": {
        "subdir": "md",
        "toc_file": "TOC.md",
        "toc_title": "Table of Contents",
        "indent": "  ",
        "line_break": "<br>",
    },
    "description": {
        "max_list_depth": 32,
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
        else:
            logger.warning("Config file %s not found, using defaults", p)
    return config
