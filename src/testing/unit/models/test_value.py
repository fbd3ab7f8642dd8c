import pytest

from influxline import Value, ValueKind


@pytest.mark.parametrize(
    "native, kind, rendered",
    [
        (True, ValueKind.Boolean, "true"),
        (False, ValueKind.Boolean, "false"),
        (82, ValueKind.SignedInteger, "82"),
        (-5, ValueKind.SignedInteger, "-5"),
        (2**63, ValueKind.UnsignedInteger, "9223372036854775808"),
        (3.7, ValueKind.Float, "3.7"),
        (82.0, ValueKind.Float, "82"),
        (-0.5, ValueKind.Float, "-0.5"),
        ("summer", ValueKind.Text, '"summer"'),
        ("", ValueKind.Text, '""'),
    ],
)
def test_from_native(native, kind: ValueKind, rendered: str):
    value = Value.from_native(native)
    assert value.kind is kind
    assert value.render() == rendered
    assert str(value) == rendered


def test_bool_is_not_an_integer():
    """bool is an int subclass: it must still map to Boolean."""
    assert Value.from_native(True).kind is ValueKind.Boolean


def test_from_native_passes_values_through():
    value = Value.unsigned(7)
    assert Value.from_native(value) is value


def test_unsupported_type_raises():
    with pytest.raises(TypeError, match="Unsupported value type 'list'"):
        Value.from_native([1, 2])

    with pytest.raises(TypeError, match="Unsupported value type 'NoneType'"):
        Value.from_native(None)


def test_integer_out_of_range_raises():
    with pytest.raises(ValueError):
        Value.from_native(2**64)


def test_unsigned_rejects_negative():
    with pytest.raises(ValueError, match="is not a valid 'unsigned_integer' value"):
        Value.unsigned(-1)


def test_kind_data_mismatch_rejected():
    with pytest.raises(ValueError):
        Value(kind=ValueKind.Boolean, data=1)

    with pytest.raises(ValueError):
        Value(kind=ValueKind.Text, data=1.5)


def test_float_accepts_integer_data():
    assert Value.float_(3).render() == "3"


def test_text_is_not_escaped():
    """Special characters are emitted verbatim inside the quotes."""
    assert Value.text('a "b", c=d').render() == '"a "b", c=d"'


@pytest.mark.parametrize("data", [float("nan"), float("inf"), float("-inf"), 10**400])
def test_float_rejects_non_finite(data):
    with pytest.raises(ValueError, match="is not a valid 'float' value"):
        Value.float_(data)


def test_from_native_rejects_nan():
    with pytest.raises(ValueError):
        Value.from_native(float("nan"))
