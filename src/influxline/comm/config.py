"""
Configuration Module.

This module defines the immutable configuration of an
[`InfluxClient`][influxline.comm.InfluxClient]: the server location, the target
database and the optional credentials.
"""

import os
from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

DEFAULT_URL = "http://localhost:8086"


@dataclass(frozen=True)
class Authentication:
    """Username/password pair sent as the `u` and `p` request parameters."""

    username: str
    password: str

    def __repr__(self) -> str:
        return f"Authentication(username={self.username!r}, password='***')"


@dataclass(frozen=True)
class ClientConfig:
    """
    Connection settings shared by every request of a client.

    Being 'frozen', a configuration can be shared by any number of concurrent
    requests; [`with_auth()`][influxline.comm.config.ClientConfig.with_auth]
    returns an updated copy instead of changing the instance.
    """

    url: str
    """Base URL of the InfluxDB HTTP API (e.g. `http://localhost:8086`)."""

    database: str
    """The database against which queries and writes are run."""

    auth: Optional[Authentication] = None
    """Optional credentials. When None, no `u`/`p` parameters are sent."""

    def with_auth(self, username: str, password: str) -> "ClientConfig":
        return replace(
            self, auth=Authentication(username=str(username), password=str(password))
        )

    def to_params(self) -> List[Tuple[str, str]]:
        """
        Returns the parameters common to every request, in wire order:
        `db`, then `u` and `p` when credentials are configured.
        """
        params = [("db", self.database)]
        if self.auth is not None:
            params.append(("u", self.auth.username))
            params.append(("p", self.auth.password))
        return params

    @classmethod
    def from_env(cls, prefix: str = "INFLUXDB_") -> "ClientConfig":
        """
        Reads the configuration from environment variables.

        | Variable | Meaning |
        | :--- | :--- |
        | `<prefix>URL` | Base URL, defaults to `http://localhost:8086` |
        | `<prefix>DATABASE` | Target database (required) |
        | `<prefix>USERNAME`, `<prefix>PASSWORD` | Credentials, used only when both are set |

        Raises:
            ValueError: If the database variable is missing or empty.
        """
        database = os.getenv(f"{prefix}DATABASE")
        if not database:
            raise ValueError(f"Missing required environment variable '{prefix}DATABASE'")

        config = cls(url=os.getenv(f"{prefix}URL", DEFAULT_URL), database=database)

        username = os.getenv(f"{prefix}USERNAME")
        password = os.getenv(f"{prefix}PASSWORD")
        if username and password is not None:
            config = config.with_auth(username, password)
        return config
