from enum import Enum


class Precision(Enum):
    """
    Time resolution of a [`Timestamp`][influxline.models.Timestamp].

    The member value is the token sent in the `precision` parameter of a write
    request. `Now` carries no token: the server stamps the point on arrival.
    """

    Now = ""
    Nanoseconds = "ns"
    Microseconds = "u"
    Milliseconds = "ms"
    Seconds = "s"
    Minutes = "m"
    Hours = "h"
