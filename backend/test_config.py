import pytest

from copyspark import config
from copyspark.errors import ConfigurationError
from copyspark.inference import ChatCompletionsClient, get_model_invoker


def test_bad_number_raises_configuration_error(monkeypatch):
    monkeypatch.setenv("LLM_TIMEOUT", "soon")

    with pytest.raises(ConfigurationError) as exc:
        config._float("LLM_TIMEOUT", "60")

    assert exc.value.details == {"name": "LLM_TIMEOUT", "value": "soon"}


def test_cors_origins_are_split(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test,")

    assert config._list("CORS_ORIGINS", "") == ["http://a.test", "http://b.test"]


def test_model_invoker_reads_settings(monkeypatch):
    monkeypatch.setattr(config, "LLM_BASE_URL", "http://llm.test/v1/")
    monkeypatch.setattr(config, "LLM_MODEL", "gpt-test")
    monkeypatch.setattr(config, "LLM_TIMEOUT", 12.0)

    invoker = get_model_invoker()

    assert isinstance(invoker, ChatCompletionsClient)
    assert invoker.base_url == "http://llm.test/v1"
    assert invoker.model == "gpt-test"
    assert invoker.timeout == 12.0
