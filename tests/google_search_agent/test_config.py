import importlib
import logging

from google_search_agent.config import get_settings, load_credentials, strip_control
from google_search_agent.logger import LeanLogfmt, lf_encode


def test_strip_control():
    assert strip_control("  key\r\n") == "key"
    assert strip_control("\x1b\tkey\x7f") == "key"
    assert strip_control("in ner") == "in ner"
    assert strip_control(" \n\t") == ""


def test_credentials_read_per_call(monkeypatch):
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    monkeypatch.delenv("GOOGLE_CSE_ID", raising=False)
    assert load_credentials().complete is False

    monkeypatch.setenv("GOOGLE_API_KEY", "\tdummy-key\n")
    monkeypatch.setenv("GOOGLE_CSE_ID", "dummy-cx ")
    credentials = load_credentials()

    assert credentials.complete is True
    assert credentials.GOOGLE_API_KEY == "dummy-key"
    assert credentials.GOOGLE_CSE_ID == "dummy-cx"


def test_settings_defaults(monkeypatch):
    for name in ("LISTEN_HOST", "PORT", "GOOGLE_SEARCH_ENDPOINT", "SEARCH_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()

    assert settings.PORT == 8080
    assert settings.GOOGLE_SEARCH_ENDPOINT == "https://www.googleapis.com/customsearch/v1"
    assert settings.SEARCH_TIMEOUT_SECONDS == 10.0


def test_logfmt_encoding():
    assert lf_encode({"a": "plain", "b": "two words", "c": 'say "hi"', "d": ""}) == \
        'a=plain b="two words" c="say \\"hi\\"" d=""'


def test_logfmt_includes_extras():
    record = logging.LogRecord("google_search_agent", logging.INFO, __file__, 1, "Performing google search", None, None)
    record.query = "test query"

    line = LeanLogfmt().format(record)

    assert "level=info" in line
    assert "logger=google_search_agent" in line
    assert 'msg="Performing google search"' in line
    assert 'query="test query"' in line


def test_logfmt_escapes_newlines_and_backslashes():
    line = lf_encode({"msg": "search", "query": "x\nts=forged level=error\\"})

    assert "\n" not in line
    assert line == 'msg=search query="x\\nts=forged level=error\\\\"'


def test_credentials_read_from_dotenv(monkeypatch, tmp_path):
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    monkeypatch.delenv("GOOGLE_CSE_ID", raising=False)
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("GOOGLE_API_KEY=file-key\nGOOGLE_CSE_ID=file-cx\n")

    credentials = load_credentials()

    assert credentials.complete is True
    assert credentials.GOOGLE_API_KEY == "file-key"

    monkeypatch.setenv("GOOGLE_API_KEY", "env-key")
    assert load_credentials().GOOGLE_API_KEY == "env-key"


def test_log_level_comes_from_settings(monkeypatch, tmp_path):
    from google_search_agent import logger

    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("LOG_LEVEL=debug\n")
    get_settings.cache_clear()
    try:
        importlib.reload(logger)

        assert logger.LOG_LEVEL == "DEBUG"
        assert logging.getLogger("google_search_agent").level == logging.DEBUG
    finally:
        monkeypatch.undo()
        get_settings.cache_clear()
        importlib.reload(logger)
