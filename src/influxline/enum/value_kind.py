from enum import Enum


class ValueKind(Enum):
    """
    Scalar wire types a [`Value`][influxline.models.Value] can hold.
    """

    Boolean = "boolean"
    Float = "float"
    SignedInteger = "signed_integer"
    UnsignedInteger = "unsigned_integer"
    Text = "text"
