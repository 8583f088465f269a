# Copyright (c) Syntropy Systems
"""Tests for the Ollama HTTP client."""

from __future__ import annotations

import json
from unittest.mock import MagicMock, patch

import httpx
import pytest

from slmbench.client import CompletionError, OllamaClient, get_client
from slmbench.models.ollama import VersionResponse


def make_client(handler) -> OllamaClient:  # noqa: ANN001
    return OllamaClient("http://ollama.test:11434/", transport=httpx.MockTransport(handler))


class TestGenerate:
    """Tests for OllamaClient.generate."""

    def test_request_shape(self) -> None:
        """Test the request body and returned text."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                200,
                json={"model": "tiny", "response": "Hello there", "done": True},
            )

        with make_client(handler) as client:
            text = client.generate(
                "tiny",
                "Say hi",
                {"temperature": 0.2, "top_k": 30},
                system="Be brief.",
            )

        assert text == "Hello there"
        request = seen[0]
        assert request.method == "POST"
        assert str(request.url) == "http://ollama.test:11434/api/generate"
        body = json.loads(request.content)
        assert body == {
            "model": "tiny",
            "prompt": "Say hi",
            "system": "Be brief.",
            "options": {"temperature": 0.2, "top_k": 30},
            "stream": False,
        }

    def test_system_omitted_when_none(self) -> None:
        """Test no system key is sent without an instruction."""
        bodies: list[dict[str, object]] = []

        def handler(request: httpx.Request) -> httpx.Response:
            bodies.append(json.loads(request.content))
            return httpx.Response(200, json={"response": ""})

        with make_client(handler) as client:
            assert client.generate("tiny", "x", {}) == ""

        assert "system" not in bodies[0]

    def test_server_error_detail(self) -> None:
        """Test the server's error message is surfaced."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"error": "model 'tiny' not found"})

        with make_client(handler) as client, pytest.raises(
            CompletionError, match="Server error: model 'tiny' not found"
        ):
            _ = client.generate("tiny", "x", {})

    def test_server_error_without_json(self) -> None:
        """Test a non-JSON error body still raises CompletionError."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, text="boom")

        with make_client(handler) as client, pytest.raises(CompletionError, match="Server error"):
            _ = client.generate("tiny", "x", {})

    def test_connection_error(self) -> None:
        """Test transport failures are wrapped."""

        def handler(request: httpx.Request) -> httpx.Response:
            msg = "refused"
            raise httpx.ConnectError(msg, request=request)

        with make_client(handler) as client, pytest.raises(
            CompletionError, match="Connection error"
        ):
            _ = client.generate("tiny", "x", {})

    def test_malformed_response(self) -> None:
        """Test a body without a response field is rejected."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"done": True})

        with make_client(handler) as client, pytest.raises(CompletionError, match="Malformed"):
            _ = client.generate("tiny", "x", {})

    def test_non_json_response(self) -> None:
        """Test a 200 with a non-JSON body is rejected."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>proxy</html>")

        with make_client(handler) as client, pytest.raises(CompletionError, match="Malformed"):
            _ = client.generate("tiny", "x", {})


class TestServerInfo:
    """Tests for version and model listing."""

    def test_list_models(self) -> None:
        """Test installed models are parsed from /api/tags."""

        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/api/tags"
            return httpx.Response(
                200,
                json={"models": [{"name": "tiny:1b", "size": 1}, {"name": "qwen2.5:0.5b"}]},
            )

        with make_client(handler) as client:
            models = client.list_models()

        assert [m.name for m in models] == ["tiny:1b", "qwen2.5:0.5b"]

    def test_version(self) -> None:
        """Test version delegates to _request."""
        client = get_client("http://localhost:11434")
        request_mock = MagicMock(return_value=VersionResponse(version="0.5.7"))
        with patch.object(client, "_request", request_mock):
            assert client.version() == "0.5.7"
            request_mock.assert_called_with(
                "GET",
                "/api/version",
                response_model=VersionResponse,
            )
        client.close()

    def test_get_client_strips_slash(self) -> None:
        """Test the base URL is normalized."""
        with get_client("http://localhost:11434/", timeout=5.0) as client:
            assert client.server_url == "http://localhost:11434"
            assert client.timeout == 5.0
