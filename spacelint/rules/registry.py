from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass
from typing import Dict, List, Type

from ..errors import UnknownRuleError
from .base import BaseRule

__all__ = [
    "register_lazy",
    "get_rule_class",
    "list_rules",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _LazySpec:
    module: str
    class_name: str


# Lazy specs: rule id -> where the class lives
_LAZY_BY_ID: Dict[str, _LazySpec] = {}

# Resolved classes
_CLASS_BY_ID: Dict[str, Type[BaseRule]] = {}


def register_lazy(*, module: str, class_name: str, rule_id: str) -> None:
    """
    Register a rule "by strings" without importing its module.
    """
    _LAZY_BY_ID[rule_id] = _LazySpec(module=module, class_name=class_name)
    _CLASS_BY_ID.pop(rule_id, None)


def _load_rule_from_spec(rule_id: str, spec: _LazySpec) -> Type[BaseRule]:
    # Both relative (".computed_property_spacing") and absolute module names are accepted.
    mod = importlib.import_module(spec.module, package=__package__)
    cls = getattr(mod, spec.class_name, None)
    if cls is None:
        raise RuntimeError(f"Rule class '{spec.class_name}' not found in {spec.module}")
    if not issubclass(cls, BaseRule):
        raise TypeError(f"{spec.module}.{spec.class_name} is not a subclass of BaseRule")
    if cls.meta.id != rule_id:
        raise RuntimeError(f"Rule {spec.module}.{spec.class_name} declares id '{cls.meta.id}', registered as '{rule_id}'")

    logger.debug("loaded rule %s from %s", rule_id, spec.module)
    _CLASS_BY_ID[rule_id] = cls
    return cls


def get_rule_class(rule_id: str) -> Type[BaseRule]:
    """
    Return the rule CLASS for an id. Nothing is instantiated.

    Raises:
        UnknownRuleError: If no rule with this id is registered
    """
    cls = _CLASS_BY_ID.get(rule_id)
    if cls:
        return cls
    spec = _LAZY_BY_ID.get(rule_id)
    if spec is None:
        raise UnknownRuleError(rule_id)
    return _load_rule_from_spec(rule_id, spec)


def list_rules() -> List[str]:
    """Sorted ids of all registered rules."""
    return sorted(_LAZY_BY_ID)
