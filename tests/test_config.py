import pytest

from term_sheet.config import DEFAULT_MAX_PDF_BYTES, load_config

ENV_KEYS = ["LOG_LEVEL", "LOG_JSON", "MAX_PDF_BYTES", "SERVICE_HOST", "SERVICE_PORT"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults():
    config = load_config()

    assert config.log_level == "INFO"
    assert config.log_json is True
    assert config.max_pdf_bytes == DEFAULT_MAX_PDF_BYTES
    assert config.max_pdf_megabytes == 50
    assert (config.service_host, config.service_port) == ("0.0.0.0", 8000)


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_JSON", "no")
    monkeypatch.setenv("MAX_PDF_BYTES", "2097152")
    monkeypatch.setenv("SERVICE_PORT", " 9001 ")

    config = load_config()

    assert config.log_level == "DEBUG"
    assert config.log_json is False
    assert config.max_pdf_megabytes == 2
    assert config.service_port == 9001


def test_blank_values_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("SERVICE_HOST", "   ")

    assert load_config().service_host == "0.0.0.0"


@pytest.mark.parametrize(
    "key, value",
    [("SERVICE_PORT", "eighty"), ("SERVICE_PORT", "70000"), ("LOG_JSON", "maybe")],
)
def test_invalid_values_name_the_variable(monkeypatch, key, value):
    monkeypatch.setenv(key, value)

    with pytest.raises(ValueError, match=key):
        load_config()
