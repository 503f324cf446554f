import pytest


@pytest.fixture()
def isolated_env(tmp_path, monkeypatch):
    """No session in the environment, no project or user .env files."""
    for name in ("SESSION", "AOC_SESSION", "AOC_BASE_URL", "AOC_USER_AGENT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.chdir(tmp_path)
    return tmp_path
