from pathlib import Path

import platformdirs
import pytest
import requests

FIXTURES_DIR = Path(__file__).parent / "fixtures"

_NETWORK_BLOCK_MSG = (
    "Network access is blocked during tests. Mock requests.* or Session.get."
)


def _block_network(*_args, **_kwargs):
    """
    Prevent network calls in tests by raising a RuntimeError.

    Raises:
        RuntimeError: with `_NETWORK_BLOCK_MSG` indicating that network access is blocked during tests.
    """
    raise RuntimeError(_NETWORK_BLOCK_MSG)


@pytest.fixture(autouse=True)
def _isolate_test_environment(tmp_path_factory, monkeypatch):
    """
    Point XDG directories and platformdirs lookups at a temporary tree.

    Keeps a developer's real configuration file out of the tests and clears
    the log level environment variable.
    """
    base = tmp_path_factory.mktemp("ruby_version_checker")
    config_dir = base / "config"
    state_dir = base / "state"
    for path in (config_dir, state_dir):
        path.mkdir(parents=True, exist_ok=True)

    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_dir))
    monkeypatch.setenv("XDG_STATE_HOME", str(state_dir))
    monkeypatch.delenv("RUBY_VERSION_CHECKER_LOG_LEVEL", raising=False)

    monkeypatch.setattr(
        platformdirs, "user_config_dir", lambda *_args, **_kwargs: str(config_dir)
    )
    monkeypatch.setattr(
        platformdirs, "user_state_dir", lambda *_args, **_kwargs: str(state_dir)
    )


@pytest.fixture(autouse=True)
def _block_requests(monkeypatch):
    """Replace the requests entry points with a blocker for every test."""
    monkeypatch.setattr(requests, "get", _block_network)
    monkeypatch.setattr(requests.Session, "request", _block_network)


@pytest.fixture
def index_text():
    """Contents of the sample release index."""
    return (FIXTURES_DIR / "index.txt").read_text(encoding="utf-8")


@pytest.fixture
def config_dir():
    """Directory platformdirs reports as the user config dir during tests."""
    return Path(platformdirs.user_config_dir("ruby-version-checker"))
