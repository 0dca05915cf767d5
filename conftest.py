import pytest

from shortsmind.core.logging import clear_context


@pytest.fixture(autouse=True)
def mock_generation_env(monkeypatch, tmp_path):
    """Keep every test away from real credentials and the user's data dir"""
    monkeypatch.setenv("GEMINI_API_KEY", "mock-key")
    monkeypatch.setenv("SHORTSMIND_DATA_DIR", str(tmp_path / "data"))
    yield
    clear_context()
