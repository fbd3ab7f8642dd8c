"""
influxline SDK: Weather Ingestion & Retrieval Example.

This script demonstrates a complete workflow against a local InfluxDB 1.x server:
1. Checking the server liveness and version.
2. Creating the target database.
3. Writing a handful of weather readings, declared as records.
4. Reading them back with a raw InfluxQL statement.
"""

import asyncio
import logging as log
import sys
from dataclasses import dataclass
from typing import Optional

from rich.console import Console
from rich.panel import Panel

from influxline import (
    ClientConfig,
    InfluxClient,
    InfluxError,
    Query,
    Timestamp,
    WriteableMixin,
    setup_sdk_logging,
)

# Configuration Constants
INFLUXDB_URL = "http://localhost:8086"
DATABASE = "weather_demo"

console = Console()


@dataclass
class WeatherReading(WriteableMixin):
    __influx_fields__ = ("temperature", "wind_strength")
    __influx_tags__ = ("location",)

    time: Timestamp
    temperature: float
    wind_strength: Optional[float]
    location: str


READINGS = [
    WeatherReading(Timestamp.hours(11), 82.0, 3.7, "us-midwest"),
    WeatherReading(Timestamp.hours(12), 84.5, None, "us-midwest"),
    WeatherReading(Timestamp.hours(13), 79.1, 5.2, "us-east"),
]


async def run(client: InfluxClient) -> None:
    info = await client.ping()
    console.print(Panel(f"InfluxDB {info.build} v{info.version}", title="Server"))

    # Not a SELECT/SHOW statement: sent via POST
    await client.query(Query.raw_read_query(f"CREATE DATABASE {DATABASE}"))

    for reading in READINGS:
        await client.query(reading.into_query("weather"))
    console.print(f"[green]Written {len(READINGS)} points[/green]")

    body = await client.query(Query.raw_read_query("SELECT * FROM weather"))
    console.print(Panel(body, title="SELECT * FROM weather"))


def main() -> int:
    setup_sdk_logging(level="DEBUG", pretty=True, console=console)

    try:
        config = ClientConfig.from_env()
    except ValueError:
        config = ClientConfig(url=INFLUXDB_URL, database=DATABASE)

    try:
        asyncio.run(run(InfluxClient.from_config(config)))
    except InfluxError as e:
        log.error(f"Example failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
