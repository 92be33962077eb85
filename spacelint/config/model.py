from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..errors import ConfigError


@dataclass
class RuleCfg:
    enabled: bool = True
    options: List[Any] = field(default_factory=list)

    @staticmethod
    def from_raw(rule_id: str, raw: Any) -> RuleCfg:
        """
        Accepted shapes:
          even                               -> options ["even"]
          [even]                             -> options ["even"]
          {enabled: true, options: [even]}
          false / true / null
        """
        if raw is None or raw is True:
            return RuleCfg()
        if raw is False:
            return RuleCfg(enabled=False)
        if isinstance(raw, list):
            return RuleCfg(options=list(raw))
        if isinstance(raw, dict):
            unknown = set(raw) - {"enabled", "options"}
            if unknown:
                raise ConfigError(f"rules.{rule_id}: unknown keys {sorted(unknown)}")
            enabled = raw.get("enabled", True)
            if not isinstance(enabled, bool):
                raise ConfigError(f"rules.{rule_id}.enabled must be a boolean")
            options = raw.get("options") or []
            if not isinstance(options, list):
                options = [options]
            return RuleCfg(enabled=enabled, options=list(options))
        return RuleCfg(options=[raw])


@dataclass
class Config:
    rules: Dict[str, RuleCfg] = field(default_factory=dict)
    ignore: List[str] = field(default_factory=list)

    @staticmethod
    def from_dict(d: Optional[Dict[str, Any]]) -> Config:
        if not d:
            return Config()

        unknown = set(d) - {"rules", "ignore"}
        if unknown:
            raise ConfigError(f"Unknown config keys: {sorted(unknown)}")

        rules_raw = d.get("rules") or {}
        if not isinstance(rules_raw, dict):
            raise ConfigError("'rules' must be a mapping of rule id to options")

        ignore = d.get("ignore") or []
        if isinstance(ignore, str):
            ignore = [ignore]
        if not isinstance(ignore, list) or not all(isinstance(x, str) for x in ignore):
            raise ConfigError("'ignore' must be a list of patterns")

        return Config(
            rules={str(k): RuleCfg.from_raw(str(k), v) for k, v in rules_raw.items()},
            ignore=list(ignore),
        )


__all__ = ["RuleCfg", "Config"]
