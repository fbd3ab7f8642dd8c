import pytest

from influxline import Authentication, ClientConfig, InfluxClient


def test_fn_database():
    client = InfluxClient("http://localhost:8068", "database")
    assert client.database_name == "database"
    assert client.database_url == "http://localhost:8068"


def test_with_auth():
    client = InfluxClient("http://localhost:8068", "database")
    assert client.config.auth is None

    with_auth = client.with_auth("username", "password")
    assert with_auth.config.auth == Authentication(username="username", password="password")
    # The first client keeps its own config
    assert client.config.auth is None
    assert with_auth.database_name == "database"


def test_basic_parameters():
    config = ClientConfig(url="http://localhost:8068", database="database")
    assert config.to_params() == [("db", "database")]

    assert config.with_auth("username", "password").to_params() == [
        ("db", "database"),
        ("u", "username"),
        ("p", "password"),
    ]


def test_config_is_frozen():
    config = ClientConfig(url="http://localhost:8068", database="database")
    with pytest.raises(AttributeError):
        config.database = "other"  # type: ignore[misc]


def test_password_not_in_repr():
    client = InfluxClient("http://localhost:8068", "database").with_auth("admin", "s3cret")
    assert "s3cret" not in repr(client)
    assert "s3cret" not in repr(client.config)


def test_from_config():
    config = ClientConfig(url="http://db:8086", database="metrics").with_auth("u", "p")
    client = InfluxClient.from_config(config)
    assert client.config is config
    assert client.database_url == "http://db:8086"


def test_config_from_env(monkeypatch):
    monkeypatch.setenv("INFLUXDB_URL", "http://influx:8086")
    monkeypatch.setenv("INFLUXDB_DATABASE", "telemetry")
    monkeypatch.setenv("INFLUXDB_USERNAME", "admin")
    monkeypatch.setenv("INFLUXDB_PASSWORD", "password")

    config = ClientConfig.from_env()
    assert config.url == "http://influx:8086"
    assert config.database == "telemetry"
    assert config.auth == Authentication(username="admin", password="password")


def test_config_from_env_defaults(monkeypatch):
    monkeypatch.delenv("INFLUXDB_URL", raising=False)
    monkeypatch.delenv("INFLUXDB_USERNAME", raising=False)
    monkeypatch.delenv("INFLUXDB_PASSWORD", raising=False)
    monkeypatch.setenv("INFLUXDB_DATABASE", "telemetry")

    config = ClientConfig.from_env()
    assert config.url == "http://localhost:8086"
    assert config.auth is None


@pytest.mark.parametrize("present", ["USERNAME", "PASSWORD"])
def test_config_from_env_needs_both_credentials(monkeypatch, present: str):
    monkeypatch.setenv("INFLUXDB_DATABASE", "telemetry")
    monkeypatch.delenv("INFLUXDB_USERNAME", raising=False)
    monkeypatch.delenv("INFLUXDB_PASSWORD", raising=False)
    monkeypatch.setenv(f"INFLUXDB_{present}", "admin")

    assert ClientConfig.from_env().auth is None


def test_config_from_env_missing_database(monkeypatch):
    monkeypatch.delenv("TEST_DATABASE", raising=False)
    with pytest.raises(ValueError, match="TEST_DATABASE"):
        ClientConfig.from_env(prefix="TEST_")
