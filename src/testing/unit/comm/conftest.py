import pytest_asyncio
from aiohttp import test_utils

from .fake_influxdb import FakeInfluxDB, start_truncating_server


@pytest_asyncio.fixture
async def fake_influxdb():
    fake = FakeInfluxDB()

    server = test_utils.TestServer(fake.application())
    await server.start_server()
    fake.url = f"http://{server.host}:{server.port}"

    yield fake

    await server.close()


@pytest_asyncio.fixture
async def truncating_influxdb_url():
    server = await start_truncating_server()
    host, port = server.sockets[0].getsockname()[:2]

    yield f"http://{host}:{port}"

    server.close()
    await server.wait_closed()
