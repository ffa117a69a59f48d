"""Logic for loading and merging configuration files."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from pkgident.deep_merge import deep_merge
from pkgident.shared_lib_name import (
    REFERENCE_PLATFORM,
    RESERVED_KEYWORDS,
    SHARED_LIB_AFFIXES,
)
from pkgident.vanity_import_resolver import DEFAULT_STRATEGIES

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "resolver": {
        "strategies": list(DEFAULT_STRATEGIES),
    },
    "naming": {
        "platform": REFERENCE_PLATFORM,
        "reserved_keywords": list(RESERVED_KEYWORDS),
        "affixes": SHARED_LIB_AFFIXES,
    },
    "workspace": {
        "roots": [],
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
            logger.warning("Config file %s not found; using defaults", p)
    return config
