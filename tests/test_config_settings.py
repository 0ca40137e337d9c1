from monorail_gateway.config import Settings


def test_defaults(monkeypatch):
    """Defaults point at the public testnet services."""

    for name in ("MONORAIL_DATA_API_URL", "DATA_API_URL", "MONORAIL_SOURCE_ID", "MONORAIL_PUBLIC_ID"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.monorail_data_api_url == "https://testnet-api.monorail.xyz/v1"
    assert settings.monorail_source_id == "1300175433951702"
    assert settings.port == 3001
    assert settings.enable_swap_execution is True


def test_legacy_url_aliases(monkeypatch):
    """Base URLs load from the short legacy names when present."""

    monkeypatch.delenv("MONORAIL_DATA_API_URL", raising=False)
    monkeypatch.delenv("MONORAIL_QUOTE_API_URL", raising=False)
    monkeypatch.setenv("DATA_API_URL", "https://data.example/v1")
    monkeypatch.setenv("QUOTE_API_URL", "https://quote.example/v4")

    settings = Settings(_env_file=None)

    assert settings.monorail_data_api_url == "https://data.example/v1"
    assert settings.monorail_quote_api_url == "https://quote.example/v4"


def test_source_id_alias(monkeypatch):
    monkeypatch.delenv("MONORAIL_SOURCE_ID", raising=False)
    monkeypatch.setenv("MONORAIL_PUBLIC_ID", "777")

    assert Settings(_env_file=None).monorail_source_id == "777"


def test_trailing_slash_stripped(monkeypatch):
    """Base URLs are normalized so path joins never double the slash."""

    monkeypatch.setenv("MONORAIL_DATA_API_URL", "https://data.example/v1/")
    monkeypatch.setenv("MONORAIL_QUOTE_API_URL", "https://quote.example/v4//")

    settings = Settings(_env_file=None)

    assert settings.monorail_data_api_url == "https://data.example/v1"
    assert settings.monorail_quote_api_url == "https://quote.example/v4"


def test_swap_execution_flag(monkeypatch):
    monkeypatch.setenv("ENABLE_SWAP_EXECUTION", "false")

    assert Settings(_env_file=None).enable_swap_execution is False
