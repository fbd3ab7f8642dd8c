from enum import StrEnum


class Endpoint(StrEnum):
    """
    Internal enumeration of the HTTP paths exposed by the InfluxDB server.

    Important: Internal Use Only
        End-users should never need these identifiers directly, as they are
        abstracted by the public methods of [`InfluxClient`][influxline.comm.InfluxClient].
    """

    QUERY = "query"
    """Runs InfluxQL statements (reads, and management statements via POST)."""

    WRITE = "write"
    """Ingests points encoded in line protocol."""

    PING = "ping"
    """Liveness check; build and version are returned as response headers."""
