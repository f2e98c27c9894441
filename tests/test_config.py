from artic_selector.config import DEFAULT_API_URL, MAX_PAGE_SIZE, get_settings


def test_defaults(monkeypatch):
    for name in ("ARTIC_API_URL", "ARTIC_PAGE_SIZE", "ARTIC_TIMEOUT_SECONDS", "ARTIC_VERBOSE"):
        monkeypatch.delenv(name, raising=False)
    settings = get_settings()
    assert settings.api_url == DEFAULT_API_URL
    assert settings.page_size == 10
    assert settings.timeout_seconds == 10.0
    assert settings.verbose is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("ARTIC_API_URL", "http://localhost:9000/artworks")
    monkeypatch.setenv("ARTIC_PAGE_SIZE", "25")
    monkeypatch.setenv("ARTIC_VERBOSE", "1")
    settings = get_settings()
    assert settings.api_url == "http://localhost:9000/artworks"
    assert settings.page_size == 25
    assert settings.verbose is True


def test_bad_page_size_falls_back(monkeypatch):
    monkeypatch.setenv("ARTIC_PAGE_SIZE", "zero")
    assert get_settings().page_size == 10
    monkeypatch.setenv("ARTIC_PAGE_SIZE", "-5")
    assert get_settings().page_size == 10


def test_page_size_capped_at_api_maximum(monkeypatch):
    monkeypatch.setenv("ARTIC_PAGE_SIZE", "150")
    assert get_settings().page_size == MAX_PAGE_SIZE == 100
    monkeypatch.setenv("ARTIC_PAGE_SIZE", "100")
    assert get_settings().page_size == 100
