import pytest

from spacelint.errors import UnknownRuleError
from spacelint.rules import BaseRule, get_rule_class, list_rules, register_lazy
from spacelint.rules import registry
from spacelint.rules.computed_property_spacing import ComputedPropertySpacingRule


def test_builtin_rule_registered():
    assert "computed-property-even-spacing" in list_rules()
    assert get_rule_class("computed-property-even-spacing") is ComputedPropertySpacingRule


def test_unknown_rule():
    with pytest.raises(UnknownRuleError):
        get_rule_class("no-such-rule")


@pytest.fixture
def scratch_registry(monkeypatch):
    monkeypatch.setattr(registry, "_LAZY_BY_ID", dict(registry._LAZY_BY_ID))
    monkeypatch.setattr(registry, "_CLASS_BY_ID", dict(registry._CLASS_BY_ID))


def test_lazy_registration_checks_class(scratch_registry):
    register_lazy(module="spacelint.errors", class_name="ConfigError", rule_id="bogus")
    with pytest.raises(TypeError):
        get_rule_class("bogus")

    register_lazy(module="spacelint.errors", class_name="Missing", rule_id="missing")
    with pytest.raises(RuntimeError):
        get_rule_class("missing")


def test_registered_id_must_match_meta(scratch_registry):
    register_lazy(
        module=".computed_property_spacing",
        class_name="ComputedPropertySpacingRule",
        rule_id="other-id",
    )
    with pytest.raises(RuntimeError):
        get_rule_class("other-id")


def test_rules_are_base_rules():
    for rule_id in list_rules():
        assert issubclass(get_rule_class(rule_id), BaseRule)
