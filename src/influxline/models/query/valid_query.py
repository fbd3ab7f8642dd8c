from typing import Any


class ValidQuery:
    """
    Wire-ready text produced by a successful `build()`.

    A `ValidQuery` is the only artifact the [`InfluxClient`][influxline.comm.InfluxClient]
    sends to the server. It compares equal to a `str` (or another `ValidQuery`)
    holding the same text.

    Note: Internal Usage
        Users obtain instances from `build()`; the text is read back with `get()`.
    """

    __slots__ = ("_inner",)

    def __init__(self, inner: str):
        self._inner = str(inner)

    def get(self) -> str:
        """Returns the rendered query text."""
        return self._inner

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, ValidQuery):
            return self._inner == other._inner
        if isinstance(other, str):
            return self._inner == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._inner)

    def __str__(self) -> str:
        return self._inner

    def __repr__(self) -> str:
        return f"ValidQuery({self._inner!r})"
