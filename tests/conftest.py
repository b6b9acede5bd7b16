"""Global test fixtures."""

import logfire
import pytest

# Keep spans local: nothing is exported or printed during tests
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep the developer's SITESCOPE_* settings and .env out of tests."""
    for name in ("SITESCOPE_CONFIG_FILE", "SITESCOPE_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
