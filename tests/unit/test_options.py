import copy
import dataclasses

import pytest

from to_plain import DEFAULT_OPTIONS, ConversionOptions, ConversionRule, RuleDefinitionError

IDENTITY_RULE = ConversionRule(match=lambda v: False, transform=lambda v, r: v, name="identity")


def test_conversion_rule_requires_callables():
    with pytest.raises(RuleDefinitionError, match="callable match"):
        ConversionRule(match=None, transform=lambda v, r: v)
    with pytest.raises(RuleDefinitionError, match="callable transform"):
        ConversionRule(match=lambda v: True, transform="nope", name="broken")


def test_conversion_rule_wrappers():
    rule = ConversionRule(match=lambda v: v == 1, transform=lambda v, recurse: recurse(v) + 1, name="inc")
    assert rule.applies_to(1) is True
    assert rule.applies_to(2) is False
    assert rule.apply(1, lambda v: v * 10) == 11
    assert repr(rule) == "ConversionRule(inc)"


def test_options_store_conversions_as_tuple():
    options = ConversionOptions(conversions=[IDENTITY_RULE])
    assert options.conversions == (IDENTITY_RULE,)


def test_options_reject_non_rules():
    with pytest.raises(RuleDefinitionError):
        ConversionOptions(conversions=[object()])


def test_options_reject_non_callable_default():
    with pytest.raises(RuleDefinitionError):
        ConversionOptions(default_transform="copy")


def test_options_are_frozen():
    options = ConversionOptions()
    with pytest.raises(dataclasses.FrozenInstanceError):
        options.default_transform = copy.copy


def test_completeness():
    assert DEFAULT_OPTIONS.is_complete
    assert not ConversionOptions().is_complete
    assert not ConversionOptions(conversions=()).is_complete


def test_resolve_fills_missing_fields():
    partial = ConversionOptions(conversions=(IDENTITY_RULE,))
    resolved = partial.resolve(DEFAULT_OPTIONS)

    assert resolved.conversions == (IDENTITY_RULE,)
    assert resolved.default_transform is DEFAULT_OPTIONS.default_transform


def test_resolve_returns_complete_options_unchanged():
    assert DEFAULT_OPTIONS.resolve(ConversionOptions()) is DEFAULT_OPTIONS


def test_with_prepended_and_appended_return_new_options():
    prepended = DEFAULT_OPTIONS.with_prepended(IDENTITY_RULE)
    appended = DEFAULT_OPTIONS.with_appended(IDENTITY_RULE)

    assert prepended.conversions[0] is IDENTITY_RULE
    assert appended.conversions[-1] is IDENTITY_RULE
    assert prepended.conversions[1:] == DEFAULT_OPTIONS.conversions
    assert IDENTITY_RULE not in DEFAULT_OPTIONS.conversions


def test_with_prepended_on_unset_conversions_holds_only_new_rules():
    assert ConversionOptions().with_prepended(IDENTITY_RULE).conversions == (IDENTITY_RULE,)


def test_with_default_transform():
    options = DEFAULT_OPTIONS.with_default_transform(copy.copy)
    assert options.default_transform is copy.copy
    assert options.conversions == DEFAULT_OPTIONS.conversions
