"""Shared test fixtures."""
import pytest
import structlog
from structlog.testing import capture_logs


@pytest.fixture
def fixed_environ():
    """A fixed environment mapping, independent of the real process env."""
    return {
        "APP_HOME": "/srv/app",
        "EMPTY_VAR": "",
    }


@pytest.fixture
def abc_file(tmp_path):
    path = tmp_path / "abc.txt"
    path.write_bytes(b"abc")
    return path


@pytest.fixture
def exit_codes(monkeypatch):
    """Replace the process exit in utilkit.utils.fatal; records codes and raises SystemExit."""
    codes = []

    def fake_exit(code):
        codes.append(code)
        raise SystemExit(code)

    monkeypatch.setattr("utilkit.utils.fatal._exit", fake_exit)
    return codes


@pytest.fixture
def captured_logs():
    """Collect structlog events emitted during the test."""
    structlog.reset_defaults()
    with capture_logs() as logs:
        yield logs
