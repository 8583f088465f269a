# Copyright (c) Syntropy Systems
"""HTTP client for the Ollama-compatible inference server."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, TypeVar, cast, overload

import httpx
from pydantic import BaseModel, ValidationError
from typing_extensions import Self

from slmbench.models.ollama import (
    ErrorResponse,
    GenerateRequest,
    GenerateResponse,
    ModelInfo,
    TagsResponse,
    VersionResponse,
)

if TYPE_CHECKING:
    from collections.abc import Mapping
    from types import TracebackType

    from slmbench.catalog import OptionValue
    from slmbench.models.base import JSONValue

logger = logging.getLogger(__name__)

ResponseModel = TypeVar("ResponseModel", bound=BaseModel)

DEFAULT_TIMEOUT = 300.0


class CompletionError(Exception):
    """Error from inference server communication."""


class CompletionBackend(Protocol):
    """Anything that can turn a prompt into a completion."""

    def generate(
        self,
        model: str,
        prompt: str,
        options: Mapping[str, OptionValue],
        system: str | None = None,
    ) -> str:
        ...


class OllamaClient:
    """Synchronous client for the Ollama HTTP API."""

    server_url: str
    timeout: float
    _client: httpx.Client

    def __init__(
        self,
        server_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            server_url: Base URL of the server (e.g., "http://localhost:11434")
            timeout: Request timeout in seconds
            transport: Optional httpx transport, used by tests

        """
        self.server_url = server_url.rstrip("/")
        self.timeout = timeout
        self._client = httpx.Client(timeout=timeout, transport=transport)

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> Self:
        """Enter the client context and return self."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit the client context and close the HTTP client."""
        self.close()

    @overload
    def _request(
        self,
        method: str,
        path: str,
        json: Mapping[str, object] | None = None,
        *,
        response_model: type[ResponseModel],
    ) -> ResponseModel:
        ...

    @overload
    def _request(
        self,
        method: str,
        path: str,
        json: Mapping[str, object] | None = None,
        *,
        response_model: None = None,
    ) -> dict[str, JSONValue]:
        ...

    def _request(
        self,
        method: str,
        path: str,
        json: Mapping[str, object] | None = None,
        *,
        response_model: type[ResponseModel] | None = None,
    ) -> ResponseModel | dict[str, JSONValue]:
        """Make an HTTP request to the server."""
        url = f"{self.server_url}{path}"
        logger.debug("%s %s", method, url)
        try:
            response = self._client.request(method=method, url=url, json=json)
            _ = response.raise_for_status()
            data = response.json()
            if response_model is None:
                return cast("dict[str, JSONValue]", data)
            return response_model.model_validate(data)
        except httpx.HTTPStatusError as e:
            # Try to get error detail from response
            try:
                detail = ErrorResponse.model_validate(e.response.json()).error
            except (ValidationError, ValueError):
                detail = str(e)
            msg = f"Server error: {detail}"
            raise CompletionError(msg) from e
        except httpx.RequestError as e:
            msg = f"Connection error: {e}"
            raise CompletionError(msg) from e
        except (ValidationError, ValueError) as e:
            msg = f"Malformed response from {url}: {e}"
            raise CompletionError(msg) from e

    def generate(
        self,
        model: str,
        prompt: str,
        options: Mapping[str, OptionValue],
        system: str | None = None,
    ) -> str:
        """Generate a completion and return its text.

        Args:
            model: Model name known to the server
            prompt: Prompt text
            options: Sampling options, sent as-is
            system: Optional system instruction

        Returns:
            The full response text

        Raises:
            CompletionError: On transport, server or decoding failure

        """
        request = GenerateRequest(
            model=model,
            prompt=prompt,
            system=system,
            options=dict(options),
        )
        result = self._request(
            "POST",
            "/api/generate",
            json=request.model_dump(exclude_none=True),
            response_model=GenerateResponse,
        )
        return result.response

    def version(self) -> str:
        """Return the server version string."""
        return self._request("GET", "/api/version", response_model=VersionResponse).version

    def list_models(self) -> list[ModelInfo]:
        """Return the models installed on the server."""
        return self._request("GET", "/api/tags", response_model=TagsResponse).models


def get_client(server_url: str, timeout: float = DEFAULT_TIMEOUT) -> OllamaClient:
    """Create an OllamaClient instance.

    Args:
        server_url: Base URL of the server
        timeout: Request timeout in seconds

    Returns:
        OllamaClient instance

    """
    return OllamaClient(server_url, timeout)
