import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep every test away from the user's real settings file."""
    path = tmp_path / "config.json"
    monkeypatch.setenv("PASSCRAFT_CONFIG", str(path))
    return path


@pytest.fixture(autouse=True)
def quiet_logging():
    """The CLI installs a stderr sink bound to the captured stream; drop it afterwards."""
    yield
    logger.remove()
    logger.disable("passcraft")
