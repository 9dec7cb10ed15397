from pathlib import Path

import pytest
from pydantic import ValidationError

from uploader.config.settings import Settings


@pytest.fixture(autouse=True)
def no_dotenv(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)


def test_defaults():
    settings = Settings()

    assert settings.store_dir == Path("files")
    assert settings.embed_assets is True
    assert settings.listen_host == "0.0.0.0"
    assert settings.listen_port == "1323"
    assert settings.listen_address == "0.0.0.0:1323"
    assert settings.log_level == "INFO"


def test_environment_overrides_defaults(monkeypatch):
    monkeypatch.setenv("UPLOADER_STORE_DIR", "/srv/uploads")
    monkeypatch.setenv("UPLOADER_EMBED_ASSETS", "false")
    monkeypatch.setenv("UPLOADER_LISTEN_PORT", "8080")

    settings = Settings()

    assert settings.store_dir == Path("/srv/uploads")
    assert settings.embed_assets is False
    assert settings.listen_port == "8080"


def test_keyword_arguments_override_environment(monkeypatch):
    monkeypatch.setenv("UPLOADER_STORE_DIR", "/srv/uploads")

    assert Settings(store_dir="elsewhere").store_dir == Path("elsewhere")


def test_dotenv_file_is_read(tmp_path):
    (tmp_path / ".env").write_text("UPLOADER_LOG_LEVEL=debug\n")

    assert Settings().log_level == "DEBUG"


def test_empty_host_means_all_interfaces():
    assert Settings(listen_host="").listen_host == "0.0.0.0"


def test_ipv6_listen_address():
    assert Settings(listen_host="::1", listen_port="80").listen_address == "[::1]:80"


@pytest.mark.parametrize("port", ["", "http", "-1", "65536"])
def test_invalid_port(port):
    with pytest.raises(ValidationError, match="Invalid listen_port"):
        Settings(listen_port=port)


def test_invalid_log_level():
    with pytest.raises(ValidationError, match="Invalid log_level"):
        Settings(log_level="chatty")


def test_settings_are_frozen():
    settings = Settings()

    with pytest.raises(ValidationError):
        settings.store_dir = Path("other")
