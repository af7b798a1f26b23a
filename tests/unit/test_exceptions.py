import pytest

from to_plain.exceptions import (
    NotSerializableError,
    RuleDefinitionError,
    ToPlainError,
    UnknownEncodingError,
)


@pytest.mark.parametrize(
    ("error_class", "message"),
    [
        (RuleDefinitionError, "Conversion rule is malformed"),
        (UnknownEncodingError, "Binary encoding name is not supported"),
        (NotSerializableError, "Converted value cannot be encoded by a downstream serializer"),
    ],
)
def test_default_messages(error_class, message):
    error = error_class()
    assert isinstance(error, ToPlainError)
    assert str(error) == message


def test_base_error_uses_docstring_and_stores_context():
    error = ToPlainError(rule="decimal")
    assert str(error).startswith("Base exception for all conversion library errors.")
    assert error.rule == "decimal"


def test_factory_messages():
    assert str(RuleDefinitionError.no_type_tags()) == "Type matcher requires at least one type tag"
    assert str(RuleDefinitionError.not_callable("", "match", 1)) == "Rule '<unnamed>' requires a callable match (got int)"
    assert RuleDefinitionError.invalid_type_tag("").tag == ""
    assert str(NotSerializableError.for_value(b"x", "boom")) == "Value of type bytes is not serializable: boom"
    assert UnknownEncodingError.for_name("x", ("hex",)).encoding == "x"


def test_type_reference_factories():
    error = RuleDefinitionError.invalid_type_path("Decimal")
    assert str(error) == "Type path must be fully qualified (got 'Decimal')"
    assert error.type_ref == "Decimal"
    assert str(RuleDefinitionError.invalid_type_ref(42)) == "Expected a class or dotted path, got int"
