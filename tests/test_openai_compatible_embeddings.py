import http.client
import io
import json
import urllib.error

import pytest

from semcat.embeddings.openai_compatible import OpenAICompatibleEmbeddingProvider
from semcat.errors import ConfigurationMissingError, EmbeddingUnavailableError


class _FakeResponse:
    def __init__(self, payload: object) -> None:
        self._payload = payload

    def __enter__(self) -> "_FakeResponse":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        return None

    def read(self) -> bytes:
        if isinstance(self._payload, bytes):
            return self._payload
        return json.dumps(self._payload).encode("utf-8")


def _provider(**kwargs) -> OpenAICompatibleEmbeddingProvider:  # noqa: ANN003
    params = {"api_key": "secret-token", "endpoint": "https://example.test"}
    params.update(kwargs)
    return OpenAICompatibleEmbeddingProvider(**params)


def test_openai_provider_model_id_defaults() -> None:
    assert _provider().model_id() == "text-embedding-3-small"
    assert _provider(model="text-embedding-3-large").model_id() == "text-embedding-3-large"


def test_openai_provider_posts_expected_payload(monkeypatch: pytest.MonkeyPatch) -> None:
    captured = {}

    def _fake_urlopen(request, timeout: float):  # noqa: ANN001
        captured["url"] = request.full_url
        captured["timeout"] = timeout
        captured["headers"] = dict(request.headers)
        captured["body"] = request.data.decode("utf-8")
        return _FakeResponse({"data": [{"embedding": [0.1, 0.2, 0.3]}]})

    monkeypatch.setattr("urllib.request.urlopen", _fake_urlopen)

    provider = _provider(endpoint="https://example.test/", timeout_seconds=3.5)
    vector = provider.embed_text("first line\nsecond line")

    assert vector == [0.1, 0.2, 0.3]
    assert captured["url"] == "https://example.test/v1/embeddings"
    assert captured["timeout"] == 3.5
    body = json.loads(captured["body"])
    assert body == {"model": "text-embedding-3-small", "input": "first line second line"}
    assert captured["headers"]["Authorization"] == "Bearer secret-token"


def test_openai_provider_requires_api_key_before_request(monkeypatch: pytest.MonkeyPatch) -> None:
    def _fail_urlopen(request, timeout: float):  # noqa: ANN001
        raise AssertionError("request must not be sent")

    monkeypatch.setattr("urllib.request.urlopen", _fail_urlopen)
    provider = _provider(api_key=None)

    with pytest.raises(ConfigurationMissingError):
        provider.ensure_configured()
    with pytest.raises(ConfigurationMissingError):
        provider.embed_text("hello")


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"data": []},
        {"data": [{}]},
        {"data": [{"embedding": []}]},
        {"data": [{"embedding": ["a", "b"]}]},
        {"data": [{"embedding": [True, False]}]},
        {"data": [{"embedding": [float("nan"), 1.0]}]},
        {"data": [{"embedding": [float("inf"), 1.0]}]},
        {"data": [{"embedding": [10**400, 1.0]}]},
        [1, 2, 3],
        b"not json",
        b"\xff\xfe",
    ],
)
def test_openai_provider_rejects_unusable_responses(monkeypatch: pytest.MonkeyPatch, payload: object) -> None:
    monkeypatch.setattr("urllib.request.urlopen", lambda request, timeout: _FakeResponse(payload))

    with pytest.raises(EmbeddingUnavailableError):
        _provider().embed_text("hello")


def test_openai_provider_wraps_http_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    def _raise_http_error(request, timeout: float):  # noqa: ANN001
        raise urllib.error.HTTPError(request.full_url, 401, "Unauthorized", {}, io.BytesIO(b""))

    monkeypatch.setattr("urllib.request.urlopen", _raise_http_error)

    with pytest.raises(EmbeddingUnavailableError, match="HTTP 401") as exc_info:
        _provider().embed_text("hello")
    assert isinstance(exc_info.value.__cause__, urllib.error.HTTPError)


def test_openai_provider_wraps_network_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    def _raise_url_error(request, timeout: float):  # noqa: ANN001
        raise urllib.error.URLError("connection refused")

    monkeypatch.setattr("urllib.request.urlopen", _raise_url_error)

    with pytest.raises(EmbeddingUnavailableError, match="request failed"):
        _provider().embed_text("hello")


def test_openai_provider_rejects_nan_body_literal(monkeypatch: pytest.MonkeyPatch) -> None:
    body = b'{"data": [{"embedding": [NaN, 1.0]}]}'
    monkeypatch.setattr("urllib.request.urlopen", lambda request, timeout: _FakeResponse(body))

    with pytest.raises(EmbeddingUnavailableError, match="non-finite"):
        _provider().embed_text("hello")


def test_openai_provider_rejects_undecodable_body(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("urllib.request.urlopen", lambda request, timeout: _FakeResponse(b"\xff\xfe"))

    with pytest.raises(EmbeddingUnavailableError, match="unreadable body") as exc_info:
        _provider().embed_text("hello")
    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)


class _BrokenResponse(_FakeResponse):
    def __init__(self, error: BaseException) -> None:
        super().__init__({})
        self._error = error

    def read(self) -> bytes:
        raise self._error


@pytest.mark.parametrize(
    "error",
    [
        ConnectionResetError("connection reset by peer"),
        http.client.IncompleteRead(b"{\"data\": ", 40),
        TimeoutError("timed out"),
    ],
)
def test_openai_provider_wraps_errors_while_reading_body(
    monkeypatch: pytest.MonkeyPatch, error: BaseException
) -> None:
    monkeypatch.setattr("urllib.request.urlopen", lambda request, timeout: _BrokenResponse(error))

    with pytest.raises(EmbeddingUnavailableError, match="request failed") as exc_info:
        _provider().embed_text("hello")
    assert exc_info.value.__cause__ is error
