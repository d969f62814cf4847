# bval/annotations/core/loader.py
"""
Shared utilities for resolving import paths and reading mapping files.
"""
from __future__ import annotations

import importlib
import logging
import os
import re
from glob import glob
from pathlib import Path
from typing import Any, Iterable

import yaml

logger = logging.getLogger(__name__)

# Pattern for environment variable substitution: ${VAR} or ${VAR:-default}
ENV_VAR_PATTERN = re.compile(r"\$\{([^}:]+)(?::-([^}]*))?\}")


def import_attr(path: str) -> Any:
    """
    Import an attribute from a module.

    Args:
        path: Import path in format 'module.path:Attr', where ``Attr`` may
            be dotted to reach nested classes ('module:Outer.Inner')

    Returns:
        The imported attribute

    Raises:
        ValueError: If path format is invalid
        ImportError: If module cannot be imported
        AttributeError: If attribute doesn't exist
    """
    if ":" not in path:
        raise ValueError(f"Invalid import path '{path}', expected 'module:attr'")

    mod_name, attr_path = path.split(":", 1)

    try:
        obj: Any = importlib.import_module(mod_name)
    except ImportError as exc:
        logger.error("Failed to import module '%s'", mod_name)
        raise ImportError(f"Cannot import module '{mod_name}'") from exc

    for attr in attr_path.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError as exc:
            logger.error("'%s' has no attribute '%s'", mod_name, attr_path)
            raise AttributeError(f"Module '{mod_name}' has no attribute '{attr_path}'") from exc
    return obj


def substitute_env_vars(value: Any) -> Any:
    """
    Recursively substitute environment variables in configuration values.

    Supports:
        - ${VAR} - substitutes with env var, raises if not set
        - ${VAR:-default} - substitutes with env var or default if not set

    Raises:
        ValueError: If required env var is not set and no default provided
    """
    if isinstance(value, str):
        return _substitute_string(value)
    elif isinstance(value, dict):
        return {k: substitute_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [substitute_env_vars(item) for item in value]
    else:
        return value


def _substitute_string(value: str) -> str:
    def replacer(match: re.Match) -> str:
        var_name, default = match.group(1), match.group(2)
        env_value = os.environ.get(var_name)
        if env_value is not None:
            return env_value
        if default is not None:
            return default
        raise ValueError(
            f"Environment variable '{var_name}' is not set and no default provided"
        )

    return ENV_VAR_PATTERN.sub(replacer, value)


def load_yaml_files(patterns: Iterable[str]) -> list[tuple[Path, dict[str, Any]]]:
    """
    Load every YAML file matching the glob patterns.

    Files are de-duplicated and returned in sorted path order together with
    their parsed content, so callers can report which file an entry came from.
    """
    patterns = list(patterns)
    files = sorted({Path(m).resolve() for pattern in patterns for m in glob(pattern)})

    if not files:
        logger.warning("No mapping files found matching patterns: %s", patterns)
        return []

    logger.info("Loading mapping files: %s", [str(f) for f in files])

    out: list[tuple[Path, dict[str, Any]]] = []
    for f in files:
        try:
            with f.open("r", encoding="utf-8") as fh:
                out.append((f, yaml.safe_load(fh) or {}))
        except Exception as exc:
            logger.error("Failed to load YAML file '%s': %s", f, exc)
            raise
    return out
