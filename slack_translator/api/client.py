"""HTTP client for the OpenAI-compatible chat-completion API.

WHY: The translator sends exactly one completion request per invocation.
Wrapping it in a small client class keeps auth, base URL, timeouts and
response parsing out of the orchestrator, and gives tests one seam to
replace (the httpx transport).

HOW: Uses httpx.Client with Bearer token auth. CompletionClient is a
context manager: enter it to get an authenticated connection pool, exit
to close it. complete() posts the payload, raises on non-2xx, and parses
the JSON body into a ChatCompletionResponse.

RULES:
- Always use the context manager (with CompletionClient(...) as client:)
- No retries; one request per call
- Non-2xx responses raise TranslationProviderError with the body verbatim
- Non-JSON or mis-shaped bodies raise ResponseParseError
- Transport errors (httpx.HTTPError) propagate unchanged
"""

from __future__ import annotations

import logging

import httpx

from slack_translator.api.models import ChatCompletionResponse, parse_completion
from slack_translator.config import OPENAI_BASE_URL
from slack_translator.errors import ResponseParseError, TranslationProviderError
from slack_translator.models import CompletionRequest

logger = logging.getLogger(__name__)

_COMPLETIONS_PATH = "/chat/completions"
_DEFAULT_TIMEOUT = httpx.Timeout(60.0, connect=10.0)


class CompletionClient:
    """Client for POST /chat/completions.

    WHY: One typed entry point for the provider call, with auth and
    error wrapping handled in one place.

    RULES:
    - api_key is required; credential checks happen before construction
    - base_url defaults to OPENAI_BASE_URL from config
    - transport is only for tests (httpx.MockTransport)
    """

    def __init__(
        self,
        api_key: str,
        base_url: str | None = None,
        transport: httpx.BaseTransport | None = None,
        timeout: httpx.Timeout | None = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = (base_url or OPENAI_BASE_URL).rstrip("/")
        self._transport = transport
        self._timeout = timeout or _DEFAULT_TIMEOUT
        self._client: httpx.Client | None = None

    def __enter__(self) -> CompletionClient:
        self._client = httpx.Client(
            base_url=self._base_url,
            headers={
                "Authorization": f"Bearer {self._api_key}",
                "Content-Type": "application/json",
            },
            timeout=self._timeout,
            transport=self._transport,
        )
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        if self._client:
            self._client.close()
            self._client = None

    def _ensure_client(self) -> httpx.Client:
        """Return the active httpx client, raising if not in context manager."""
        if self._client is None:
            raise RuntimeError(
                "CompletionClient must be used as a context manager: "
                "with CompletionClient(api_key) as client: ..."
            )
        return self._client

    def complete(self, request: CompletionRequest) -> ChatCompletionResponse:
        """Send one completion request and return the parsed response.

        RULES:
        - Any 2xx status counts as success
        - Raises TranslationProviderError(status, body) otherwise
        - Raises ResponseParseError if the body is not the expected JSON

        Args:
            request: The completion request to send.

        Returns:
            The validated ChatCompletionResponse.
        """
        client = self._ensure_client()
        resp = client.post(_COMPLETIONS_PATH, json=request.to_payload())

        logger.debug(
            "Completion response: status=%s model=%s",
            resp.status_code,
            request.model,
        )

        if not resp.is_success:
            raise TranslationProviderError(resp.status_code, resp.text)

        try:
            data = resp.json()
        except ValueError as exc:
            raise ResponseParseError("translation", "invalid JSON ({})".format(exc)) from exc

        return parse_completion(data)
