from .influx_client import InfluxClient as InfluxClient
from .config import (
    Authentication as Authentication,
    ClientConfig as ClientConfig,
)
from .server_info import ServerInfo as ServerInfo
