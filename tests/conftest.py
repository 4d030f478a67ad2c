import pytest

from logsieve.sample import SAMPLE_LOG


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """
    Keep LOGSIEVE_* settings from the developer's shell or .env out of tests.
    """
    for name in ("LOGSIEVE_MIN_SEVERITY", "LOGSIEVE_LOG_LEVEL", "LOGSIEVE_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sample_log_file(tmp_path):
    path = tmp_path / "sample.log"
    path.write_text(SAMPLE_LOG, encoding="utf-8")
    return path
