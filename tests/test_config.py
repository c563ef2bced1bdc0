import pytest

from api.config import DEFAULT_API_NAME, DEFAULT_SPACE, get_settings

ENV_VARS = ["HF_ACCESS_TOKEN", "PREDICTOR_SPACE", "PREDICTOR_API_NAME", "PREDICTOR_TIMEOUT", "CORS_ORIGINS", "LOG_LEVEL"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    s = get_settings()
    assert s.hf_token is None
    assert s.space == DEFAULT_SPACE
    assert s.api_name == DEFAULT_API_NAME
    assert s.timeout == 30.0
    assert s.cors_origins == ("*",)
    assert s.log_level == "INFO"


def test_from_environment(monkeypatch):
    monkeypatch.setenv("HF_ACCESS_TOKEN", "hf_abc")
    monkeypatch.setenv("PREDICTOR_TIMEOUT", "12.5")
    monkeypatch.setenv("CORS_ORIGINS", "http://localhost:8501, https://farm.example")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    s = get_settings()
    assert s.hf_token == "hf_abc"
    assert s.timeout == 12.5
    assert s.cors_origins == ("http://localhost:8501", "https://farm.example")
    assert s.log_level == "DEBUG"


def test_bad_timeout(monkeypatch):
    monkeypatch.setenv("PREDICTOR_TIMEOUT", "soon")
    with pytest.raises(ValueError):
        get_settings()
