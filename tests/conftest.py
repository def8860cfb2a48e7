import pytest

ENV_VARS = ("XDG_CACHE_HOME", "XDG_CONFIG_HOME", "XDG_DATA_HOME", "HOME", "APPDATA", "STD_DIRS_PLATFORM", "STD_DIRS_LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove every variable the resolver or CLI reads from the process environment."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def home_env(tmp_path, monkeypatch):
    """Point HOME and APPDATA at a temporary directory."""
    home = tmp_path / "home"
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("APPDATA", str(home / "AppData"))
    return home

