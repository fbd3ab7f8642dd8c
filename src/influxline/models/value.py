"""
Scalar Field and Tag Values.

This module defines `Value`, the tagged union of the scalar wire types accepted by
the line protocol, and the rules used to render each of them as text.

| Kind | Python input | Rendering |
| :--- | :--- | :--- |
| `Boolean` | `bool` | `true` / `false` |
| `Float` | finite `float` | shortest decimal, integral values without fraction (`82.0` -> `82`) |
| `SignedInteger` | `int` (64-bit range) | decimal |
| `UnsignedInteger` | `int` above the signed 64-bit range | decimal |
| `Text` | `str` | `"<text>"` |

Warning: No escaping
    Text values are wrapped in double quotes but their content is emitted verbatim.
    Values containing quotes, commas, spaces or equal signs will corrupt the line
    protocol. This matches the wire output of existing writers of this format.
"""

import math
from typing import Any, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    model_validator,
)

from ..enum import ValueKind

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_U64_MAX = 2**64 - 1


def _is_finite(x) -> bool:
    try:
        return math.isfinite(x)
    except OverflowError:
        return False


def _render_float(x: float) -> str:
    if math.isfinite(x) and x.is_integer():
        return str(int(x))
    return repr(x)


class Value(BaseModel):
    """
    A single scalar ready to be written as a field or tag value.

    Most callers never build a `Value` explicitly: the
    [`WriteQuery`][influxline.models.query.builders.WriteQuery] builder converts
    native Python scalars through [`from_native`][influxline.models.Value.from_native].
    The explicit constructors are useful to force a wire type, e.g. an unsigned
    integer.

    Attributes:
        kind: The wire type.
        data: The underlying Python scalar.
    """

    model_config = ConfigDict(frozen=True)

    kind: ValueKind
    data: Union[StrictBool, StrictInt, StrictFloat, StrictStr]

    @model_validator(mode="after")
    def validate_kind_matches_data(self) -> "Value":
        data = self.data
        is_int = isinstance(data, int) and not isinstance(data, bool)

        if self.kind is ValueKind.Boolean:
            ok = isinstance(data, bool)
        elif self.kind is ValueKind.Float:
            # nan, inf and ints beyond the float range have no line protocol form
            ok = (isinstance(data, float) or is_int) and _is_finite(data)
        elif self.kind is ValueKind.SignedInteger:
            ok = is_int and _I64_MIN <= data <= _I64_MAX
        elif self.kind is ValueKind.UnsignedInteger:
            ok = is_int and 0 <= data <= _U64_MAX
        else:
            ok = isinstance(data, str)

        if not ok:
            raise ValueError(
                f"Data {data!r} ({type(data).__name__}) is not a valid '{self.kind.value}' value"
            )
        return self

    # --- Factories ---

    @classmethod
    def boolean(cls, data: bool) -> "Value":
        return cls(kind=ValueKind.Boolean, data=data)

    @classmethod
    def float_(cls, data: float) -> "Value":
        return cls(kind=ValueKind.Float, data=data)

    @classmethod
    def signed(cls, data: int) -> "Value":
        return cls(kind=ValueKind.SignedInteger, data=data)

    @classmethod
    def unsigned(cls, data: int) -> "Value":
        return cls(kind=ValueKind.UnsignedInteger, data=data)

    @classmethod
    def text(cls, data: str) -> "Value":
        return cls(kind=ValueKind.Text, data=data)

    @classmethod
    def from_native(cls, value: Any) -> "Value":
        """
        Converts a native Python scalar into a `Value`.

        `bool` is checked before `int` (it is an `int` subclass in Python).
        Integers map to `SignedInteger`, or to `UnsignedInteger` when they only
        fit the unsigned 64-bit range.

        Args:
            value: A `bool`, `int`, `float`, `str` or an existing `Value`.

        Returns:
            The corresponding `Value`.

        Raises:
            TypeError: If the type is not a supported scalar.
            ValueError: If an integer does not fit in 64 bits, or a float is nan or infinite.
        """
        if isinstance(value, Value):
            return value
        if isinstance(value, bool):
            return cls.boolean(value)
        if isinstance(value, int):
            if value > _I64_MAX:
                return cls.unsigned(value)
            return cls.signed(value)
        if isinstance(value, float):
            return cls.float_(value)
        if isinstance(value, str):
            return cls.text(value)
        raise TypeError(
            f"Unsupported value type '{type(value).__name__}'. "
            "Expected one of: bool, int, float, str, Value."
        )

    # --- Rendering ---

    def render(self) -> str:
        """Returns the line protocol text of this value."""
        if self.kind is ValueKind.Boolean:
            return "true" if self.data else "false"
        if self.kind is ValueKind.Float:
            return _render_float(float(self.data))
        if self.kind is ValueKind.Text:
            return f'"{self.data}"'
        return str(self.data)

    def __str__(self) -> str:
        return self.render()
