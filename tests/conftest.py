import pytest
from google_search_agent.config import get_settings

SEARCH_HOST = "www.googleapis.com"
SEARCH_PATH = "/customsearch/v1"

@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """
    Ensure each test starts with a fresh Settings() object.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

@pytest.fixture
def google_env(monkeypatch):
    monkeypatch.setenv("GOOGLE_API_KEY", "dummy-key")
    monkeypatch.setenv("GOOGLE_CSE_ID", "dummy-cx")

@pytest.fixture
def no_google_env(monkeypatch):
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    monkeypatch.delenv("GOOGLE_CSE_ID", raising=False)

@pytest.fixture
def search_route(respx_mock):
    """Route matching any GET to the Custom Search endpoint."""
    return respx_mock.get(host=SEARCH_HOST, path=SEARCH_PATH)
