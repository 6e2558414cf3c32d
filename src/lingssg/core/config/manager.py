"""
Layered YAML configuration for lingssg.
"""
from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple

import jsonschema
import yaml

from lingssg.core.exceptions import ConfigError
from lingssg.core.utils.merge import deep_merge
from lingssg.data import get_data_path, read_yaml as read_data_yaml

logger = logging.getLogger(__name__)

PROJECT_CONFIG_DIR = ".lingssg"
ENV_PREFIX = "LINGSSG_"
SCHEMA_FILE = "config.schema.yaml"


class ConfigManager:
    """Load, merge, and validate lingssg configuration.

    Configuration sources (highest to lowest priority):
    1. Environment variables: LINGSSG_<section>__<key>
    2. Project config: <repo>/.lingssg/config/*.yaml (alphabetical order)
    3. Bundled defaults: lingssg.data/config/*.yaml (alphabetical order)
    """

    def __init__(self, repo_root: Optional[Path] = None) -> None:
        self.repo_root = Path(repo_root or Path.cwd()).resolve()
        self.core_config_dir = get_data_path("config")
        self.project_config_dir = self.repo_root / PROJECT_CONFIG_DIR / "config"
        self._config: Optional[Dict[str, Any]] = None

    def load_yaml(self, path: Path) -> Dict[str, Any]:
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as err:
            # Configuration must never silently ignore invalid YAML.
            raise ConfigError(f"Invalid YAML in {path}: {err}", context={"path": str(path)}) from err
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a mapping", context={"path": str(path)})
        return data

    def _load_directory(self, directory: Path, cfg: Dict[str, Any]) -> Dict[str, Any]:
        if not directory.is_dir():
            return cfg
        for path in sorted([*directory.glob("*.yaml"), *directory.glob("*.yml")]):
            logger.debug("Merging config file %s", path)
            cfg = deep_merge(cfg, self.load_yaml(path))
        return cfg

    # ========== Environment overrides ==========

    def _coerce_type(self, value: str) -> Any:
        s = value.strip()
        low = s.lower()
        if low in {"true", "false"}:
            return low == "true"
        if re.fullmatch(r"[-+]?\d+", s):
            return int(s)
        if re.fullmatch(r"[-+]?\d*\.\d+", s) or re.fullmatch(r"[-+]?\d+\.\d*", s):
            return float(s)
        if (s.startswith("{") and s.endswith("}")) or (s.startswith("[") and s.endswith("]")):
            try:
                return json.loads(s)
            except json.JSONDecodeError:
                return s
        return s

    def _iter_env_overrides(self) -> Iterator[Tuple[List[str], Any]]:
        for key in sorted(os.environ.keys()):
            if not key.startswith(ENV_PREFIX):
                continue
            raw = key[len(ENV_PREFIX):]
            parts = [p.lower() for p in raw.split("__")]
            if not raw or any(not p for p in parts):
                raise ConfigError(f"Malformed {ENV_PREFIX}* key: {key}", context={"key": key})
            yield parts, self._coerce_type(os.environ[key])

    def _set_nested(self, root: Dict[str, Any], path: List[str], value: Any) -> None:
        current = root
        for part in path[:-1]:
            nxt = current.get(part)
            if not isinstance(nxt, dict):
                nxt = {}
                current[part] = nxt
            current = nxt
        current[path[-1]] = value

    def apply_env_overrides(self, cfg: Dict[str, Any]) -> None:
        for path, value in self._iter_env_overrides():
            logger.debug("Config override from environment: %s", ".".join(path))
            self._set_nested(cfg, path, value)

    # ========== Loading ==========

    def validate_schema(self, cfg: Dict[str, Any]) -> None:
        schema = read_data_yaml("schemas", SCHEMA_FILE)
        validator = jsonschema.Draft202012Validator(schema)
        errors = sorted(validator.iter_errors(cfg), key=lambda e: list(e.path))
        if errors:
            details = "; ".join(
                f"{'.'.join(str(p) for p in err.path) or '<root>'}: {err.message}" for err in errors
            )
            raise ConfigError(f"Invalid configuration: {details}", context={"errors": len(errors)})

    def load_config(self, validate: bool = True) -> Dict[str, Any]:
        """Load and merge configuration from all layers.

        Args:
            validate: If True, validate against the bundled JSON schema

        Returns:
            Merged configuration dictionary
        """
        cfg: Dict[str, Any] = {}
        cfg = self._load_directory(self.core_config_dir, cfg)
        cfg = self._load_directory(self.project_config_dir, cfg)
        self.apply_env_overrides(cfg)
        if validate:
            self.validate_schema(cfg)
        self._config = cfg
        return cfg

    def get_all(self) -> Dict[str, Any]:
        if self._config is None:
            return self.load_config()
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        """Get a config value by dot-separated path, e.g. ``site.output_dir``."""
        current: Any = self.get_all()
        for part in key.split("."):
            if not isinstance(current, dict) or part not in current:
                return default
            current = current[part]
        return current


__all__ = ["ConfigManager", "PROJECT_CONFIG_DIR", "ENV_PREFIX"]
