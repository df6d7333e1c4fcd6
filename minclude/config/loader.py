"""Helpers for loading reduction configuration from TOML/JSON sources.

This module provides a single entry point `load_reduce_config`
that accepts various configuration sources:

* None -> default ReduceConfig
* dict -> validated ReduceConfig
* Path / path-like string -> load .toml/.json from filesystem
* Inline JSON/TOML strings
"""

from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Union

from minclude.config.schema import ReduceConfig

logger = logging.getLogger("minclude.config.loader")

ConfigSource = Union[str, Path, Dict[str, Any], None]

# Optional table name used when the config lives in a shared TOML file
SECTION = "minclude"


def _parse(text: str, fmt: str) -> Dict[str, Any]:
    data = json.loads(text) if fmt == "json" else tomllib.loads(text)
    if not isinstance(data, dict):
        raise ValueError("Top-level configuration must be a mapping/dict")
    section = data.get(SECTION)
    if isinstance(section, dict):
        return section
    return data


def load_reduce_config(
    source: ConfigSource, overrides: Optional[Dict[str, Any]] = None
) -> ReduceConfig:
    """Load ReduceConfig from various configuration sources.

    Args:
        source: One of:
            * None: returns the default configuration
            * dict: treated as already-parsed configuration mapping
            * str/Path: either a filesystem path to a .toml/.json file,
              or an inline TOML/JSON string (auto-detected)
        overrides: Values taking precedence over ``source`` (typically the
            flags given on the command line). ``None`` values are ignored.

    Returns:
        ReduceConfig instance.
    """
    data: Dict[str, Any]

    if source is None:
        logger.debug("No config source provided; using defaults")
        data = {}
    elif isinstance(source, dict):
        logger.debug("Loading ReduceConfig from provided dict")
        data = dict(source)
    elif isinstance(source, (str, Path)):
        path = Path(source)
        if path.is_file():
            text = path.read_text(encoding="utf-8")
            suffix = path.suffix.lower()
            if suffix in {".toml", ".tml"}:
                fmt = "toml"
            elif suffix == ".json":
                fmt = "json"
            else:
                # Fallback: guess from content
                fmt = "json" if text.lstrip().startswith(("{", "[")) else "toml"
            logger.info("Loading configuration from file: %s (fmt=%s)", path, fmt)
        else:
            # Inline string; auto-detect format
            text = str(source)
            fmt = "json" if text.lstrip().startswith(("{", "[")) else "toml"
            logger.info("Loading configuration from inline %s string", fmt)
        data = _parse(text, fmt)
    else:
        raise TypeError(f"Unsupported config source type: {type(source)!r}")

    if overrides:
        data.update({key: value for key, value in overrides.items() if value is not None})

    return ReduceConfig.model_validate(data)


__all__ = ["load_reduce_config"]
