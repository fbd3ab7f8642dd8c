from dataclasses import dataclass


@dataclass(frozen=True)
class ServerInfo:
    """
    Build information of an InfluxDB server, as returned by
    [`InfluxClient.ping()`][influxline.comm.InfluxClient.ping].

    Attributes:
        build (str): The build flavour (value of the `X-Influxdb-Build` header, e.g. "OSS").
        version (str): The server version (value of the `X-Influxdb-Version` header).
    """

    build: str
    version: str
