"""TDD: Config tests written FIRST"""
import pytest
from vision_gateway.config import Config


@pytest.fixture(autouse=True)
def _no_dotenv(monkeypatch):
    monkeypatch.setattr("vision_gateway.config.load_dotenv", lambda **_: None)
    for name in ("GOOGLE_CREDENTIALS_PATH", "HOST", "PORT", "LOG_LEVEL", "CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)


def test_config_from_env_success(monkeypatch):
    """Happy-path: all env vars present."""
    monkeypatch.setenv("GOOGLE_CREDENTIALS_PATH", "/secrets/key.json")
    monkeypatch.setenv("HOST", "0.0.0.0")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    config = Config.from_env()

    assert config.credentials_path == "/secrets/key.json"
    assert config.host == "0.0.0.0"
    assert config.port == 8080
    assert config.log_level == "DEBUG"


def test_config_defaults():
    """Optional fields have sensible defaults."""
    config = Config.from_env()

    assert config.credentials_path == "./service-account.json"
    assert config.host == "127.0.0.1"
    assert config.port == 5000
    assert config.log_level == "INFO"
    assert config.cors_origins == ("*",)


def test_config_blank_credentials_becomes_none(monkeypatch):
    """Blank GOOGLE_CREDENTIALS_PATH → None (application default credentials)."""
    monkeypatch.setenv("GOOGLE_CREDENTIALS_PATH", "")

    config = Config.from_env()

    assert config.credentials_path is None


def test_config_parses_cors_origins(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "http://localhost:3000, https://example.com,")

    config = Config.from_env()

    assert config.cors_origins == ("http://localhost:3000", "https://example.com")


def test_config_non_numeric_port_fails(monkeypatch):
    """PORT must parse as an int."""
    monkeypatch.setenv("PORT", "http")

    with pytest.raises(ValueError, match="PORT"):
        Config.from_env()


@pytest.mark.parametrize("port", ["0", "70000", "-1"])
def test_config_out_of_range_port_fails(monkeypatch, port):
    monkeypatch.setenv("PORT", port)

    with pytest.raises(ValueError, match="PORT"):
        Config.from_env()


def test_config_empty_host_fails(monkeypatch):
    monkeypatch.setenv("HOST", "")

    with pytest.raises(ValueError, match="HOST"):
        Config.from_env()


def test_config_immutable():
    """Frozen dataclass: attribute assignment must fail."""
    config = Config(
        credentials_path=None,
        host="127.0.0.1",
        port=5000,
        log_level="INFO",
        cors_origins=("*",),
    )

    with pytest.raises(Exception):
        config.port = 9000
