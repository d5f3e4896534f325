import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Keep the caller's BF_* variables and any stray .env file out of the tests."""
    for name in ("BF_TAPE_LENGTH", "BF_CELL_MAX", "BF_INPUT_MODE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
