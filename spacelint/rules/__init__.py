from __future__ import annotations

from .base import BaseRule, RuleMeta
from .registry import register_lazy, get_rule_class, list_rules

# Built-in rules
register_lazy(
    module=".computed_property_spacing",
    class_name="ComputedPropertySpacingRule",
    rule_id="computed-property-even-spacing",
)

__all__ = ["BaseRule", "RuleMeta", "register_lazy", "get_rule_class", "list_rules"]
