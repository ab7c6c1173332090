import threading
import time
import pytest
import requests
from letterbox.config import LetterBoxSettings
from letterbox.dictionary import (
    DictionaryProvider,
    DictionaryState,
    fetch_word_list,
    read_word_list,
    split_words,
)
from letterbox.errors import DictionaryLoadError

class FakeResponse:
    def __init__(self, status_code, text=""):
        self.status_code = status_code
        self.text = text

    @property
    def ok(self):
        return 200 <= self.status_code < 400

def test_split_words_trims_and_drops_blanks():
    assert split_words("cab\r\n  bed \n\n\ndig\n") == ["cab", "bed", "dig"]

def test_fetch_success(monkeypatch):
    seen = {}

    def fake_get(url, timeout):
        seen["url"] = url
        seen["timeout"] = timeout
        return FakeResponse(200, "cab\nbed\n")

    monkeypatch.setattr(requests, "get", fake_get)
    assert fetch_word_list("http://example.test/words.txt", timeout=5) == "cab\nbed\n"
    assert seen == {"url": "http://example.test/words.txt", "timeout": 5}

def test_fetch_bad_status(monkeypatch):
    monkeypatch.setattr(requests, "get", lambda url, timeout: FakeResponse(404))
    with pytest.raises(DictionaryLoadError, match="Failed to fetch dictionary: 404"):
        fetch_word_list("http://example.test/words.txt")

def test_fetch_transport_error(monkeypatch):
    def boom(url, timeout):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(requests, "get", boom)
    with pytest.raises(DictionaryLoadError, match="connection refused"):
        fetch_word_list("http://example.test/words.txt")

def test_read_word_list(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("lice\ngal\n", encoding="utf-8")
    assert read_word_list(str(path)) == "lice\ngal\n"

    with pytest.raises(DictionaryLoadError, match="not found"):
        read_word_list(str(tmp_path / "missing.txt"))

def test_provider_fetches_once(make_provider):
    provider, fetch = make_provider(["lice", "", "gal"])
    assert provider.state is DictionaryState.UNLOADED

    assert provider.words() == ("lice", "gal")
    assert provider.words() == ("lice", "gal")
    assert provider.state is DictionaryState.LOADED
    assert fetch.calls == 1

def test_provider_stays_unloaded_after_failure():
    calls = []

    def flaky():
        calls.append(1)
        if len(calls) == 1:
            raise DictionaryLoadError("Failed to fetch dictionary: 503")
        return "lice\n"

    provider = DictionaryProvider(flaky)
    with pytest.raises(DictionaryLoadError):
        provider.words()
    assert provider.state is DictionaryState.UNLOADED

    assert provider.words() == ("lice",)
    assert provider.state is DictionaryState.LOADED
    assert len(calls) == 2

def test_from_settings_prefers_local_file(tmp_path, monkeypatch):
    path = tmp_path / "words.txt"
    path.write_text("kil\n", encoding="utf-8")

    def no_network(url, timeout):
        raise AssertionError("should not fetch")

    monkeypatch.setattr(requests, "get", no_network)
    provider = DictionaryProvider.from_settings(LetterBoxSettings(word_list_path=str(path)))
    assert provider.words() == ("kil",)

def test_from_settings_uses_url(monkeypatch):
    monkeypatch.setattr(requests, "get", lambda url, timeout: FakeResponse(200, url + "\n"))
    config = LetterBoxSettings(word_list_path=None, dictionary_url="http://example.test/w.txt")
    provider = DictionaryProvider.from_settings(config)
    assert provider.words() == ("http://example.test/w.txt",)

def test_concurrent_callers_share_one_fetch():
    calls = []

    def slow_fetch():
        calls.append(1)
        time.sleep(0.2)
        return "lice\ngal\n"

    provider = DictionaryProvider(slow_fetch)
    results = []
    threads = [threading.Thread(target=lambda: results.append(provider.words())) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(calls) == 1
    assert results == [("lice", "gal")] * 4
    assert provider.state is DictionaryState.LOADED
