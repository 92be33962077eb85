from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ..errors import ConfigError
from ..rules import get_rule_class
from .model import Config
from .paths import find_config

logger = logging.getLogger(__name__)

_yaml = YAML(typ="safe")


def _read_yaml_map(path: Path) -> dict:
    """Read a YAML file and return its top-level mapping."""
    try:
        raw = _yaml.load(path.read_text(encoding="utf-8")) or {}
    except YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"YAML must be a mapping: {path}")
    return raw


def load_config(root: Path, path: Optional[Path] = None) -> Config:
    """
    Load spacelint configuration.

    Args:
        root: Project root, searched for spacelint.yaml / .spacelint.yaml
        path: Explicit config file (takes precedence over the search)

    Returns:
        Parsed config; defaults when no file exists

    Raises:
        ConfigError: On unreadable/invalid files or unknown rule ids
    """
    if path is not None:
        if not path.is_file():
            raise ConfigError(f"Config file not found: {path}")
        cfg_file: Optional[Path] = path
    else:
        cfg_file = find_config(root)

    if cfg_file is None:
        logger.debug("no config file under %s, using defaults", root)
        return Config()

    logger.debug("loading config from %s", cfg_file)
    cfg = Config.from_dict(_read_yaml_map(cfg_file))
    for rule_id in cfg.rules:
        # raises UnknownRuleError (a user error) for typos
        get_rule_class(rule_id)
    return cfg


def parse_rule_overrides(specs: Optional[list[str]]) -> Dict[str, str]:
    """Parse '--rule ID=OPTION' values into a dict."""
    result: Dict[str, str] = {}
    if not specs:
        return result

    for spec in specs:
        if "=" not in spec:
            raise ConfigError(f"Invalid rule override '{spec}'. Expected 'rule-id=option'")
        rule_id, option = spec.split("=", 1)
        result[rule_id.strip()] = option.strip()

    return result


__all__ = ["load_config", "parse_rule_overrides"]
