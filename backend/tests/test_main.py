"""Tests for application wiring: status route, lifespan, error bodies."""
from datetime import datetime

import pytest
from fastapi.testclient import TestClient

import gateway.config as config_module
from gateway.config import AppConfig, OpenAISecrets, ProviderSettings, Secrets
from gateway.diagnostics import describe_payload
from gateway.errors import ProviderError, RequestValidationFailed
from gateway.main import app, build_provider
from gateway.provider import EmbeddingItem, EmbeddingResult, OpenAIProvider, get_provider


@pytest.fixture
def custom_config(monkeypatch):
    """Install an in-memory config as the process-wide config."""
    def _install(config: AppConfig) -> AppConfig:
        monkeypatch.setattr(config_module, "_config", config)
        return config
    return _install


class TestStatusRoute:
    def test_status(self, api_client: TestClient):
        resp = api_client.get("/")
        assert resp.status_code == 200
        data = resp.json()
        assert data["message"] == "LLM Gateway is running!"
        assert data["timestamp"].endswith("Z")
        datetime.fromisoformat(data["timestamp"].replace("Z", "+00:00"))

    def test_cors_allows_any_origin_by_default(self, api_client: TestClient):
        resp = api_client.get("/", headers={"Origin": "http://example.com"})
        assert resp.headers["access-control-allow-origin"] == "*"

    def test_non_json_body_is_400(self, api_client: TestClient, fake_provider):
        resp = api_client.post(
            "/api/chat",
            content=b"message=hi",
            headers={"Content-Type": "application/json"},
        )
        assert resp.status_code == 400
        assert resp.json()["error"] == "Invalid request body"
        assert fake_provider.call_count == 0


class TestLifespan:
    def test_registers_openai_provider(self, custom_config, fake_provider):
        custom_config(
            AppConfig(
                secrets=Secrets(openai=OpenAISecrets(api_key="sk-test", base_url="http://llm.local/v1")),
                provider=ProviderSettings(timeout_seconds=5),
            )
        )
        with TestClient(app):
            provider = get_provider()
            assert isinstance(provider, OpenAIProvider)
            assert provider.api_key == "sk-test"
            assert provider.base_url == "http://llm.local/v1"
            assert provider.timeout == 5
        assert get_provider() is None

    def test_missing_api_key_warns_but_starts(self, custom_config, fake_provider, caplog):
        custom_config(AppConfig())
        with caplog.at_level("WARNING", logger="gateway.main"):
            with TestClient(app) as client:
                assert client.get("/").status_code == 200
                assert isinstance(get_provider(), OpenAIProvider)
        assert "OPENAI_API_KEY not found" in caplog.text

    def test_build_provider_carries_payload_flag(self):
        config = AppConfig()
        config.logging.log_payloads = True
        assert build_provider(config).log_payloads is True


class TestErrors:
    def test_validation_failed_is_400(self):
        exc = RequestValidationFailed("Prompt is required")
        assert exc.status_code == 400
        assert exc.message == "Prompt is required"

    def test_provider_error_defaults_to_unknown(self):
        assert ProviderError().message == "Unknown error"
        assert ProviderError("").message == "Unknown error"

    def test_from_exception_prefers_message_attribute(self):
        class SDKError(Exception):
            def __init__(self):
                super().__init__("long form")
                self.message = "short form"

        assert ProviderError.from_exception(SDKError()).message == "short form"
        assert ProviderError.from_exception(ValueError("boom")).message == "boom"

    def test_from_exception_keeps_provider_error(self):
        original = ProviderError("already wrapped")
        assert ProviderError.from_exception(original) is original


class TestDiagnostics:
    def test_describes_dataclass_result(self):
        result = EmbeddingResult(
            items=[EmbeddingItem(index=0, embedding=[0.25, 0.5, 0.75, 1.0])],
            usage={"prompt_tokens": 1, "total_tokens": 1},
            model="text-embedding-ada-002",
        )
        text = describe_payload(result, "EMBEDDING")
        assert text.splitlines()[0] == "=== EMBEDDING ==="
        assert "type: EmbeddingResult" in text
        assert "items: list len=1 first=dict" in text
        assert "usage: dict keys=[prompt_tokens, total_tokens]" in text
        assert "model: str" in text

    def test_samples_numeric_lists(self):
        text = describe_payload({"embedding": [0.1, 0.2, 0.3, 0.4]}, "VECTOR")
        assert "embedding: list len=4 sample=[0.1, 0.2, 0.3, ...]" in text

    def test_describes_plain_list(self):
        text = describe_payload([1, 2], "LIST")
        assert "len=2" in text
