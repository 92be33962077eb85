from __future__ import annotations

from .load import load_config, parse_rule_overrides
from .model import Config, RuleCfg
from .paths import CFG_FILES, find_config

__all__ = ["Config", "RuleCfg", "CFG_FILES", "find_config", "load_config", "parse_rule_overrides"]
