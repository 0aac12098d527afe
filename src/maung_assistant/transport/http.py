"""HTTP transport for the assistant's chat endpoint."""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from ..config import CHAT_ENDPOINT
from ..exceptions import TransportError
from .base import AITransport
from .models import ChatRequest, ChatResponse

logger = logging.getLogger(__name__)


class HttpTransport(AITransport):
    """POSTs chat requests as JSON to the backend's chat endpoint.

    Hidden design decisions:
    - HTTP client setup and connection reuse
    - Endpoint path and payload encoding
    - Mapping of network and decoding failures to TransportError
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8080",
        endpoint: str = CHAT_ENDPOINT,
        timeout: float | None = None,
        **client_kwargs: Any
    ):
        """Initialize the HTTP transport.

        Args:
            base_url: Server root, e.g. 'http://localhost:8080'
            endpoint: Path of the chat handler
            timeout: Request timeout in seconds (None waits indefinitely)
            **client_kwargs: Additional kwargs for httpx.AsyncClient
        """
        self._endpoint = endpoint
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            **client_kwargs
        )

    @property
    def base_url(self) -> str:
        return str(self._client.base_url)

    async def chat(self, request: ChatRequest) -> ChatResponse:
        logger.debug(
            "POST %s (%d history messages)", self._endpoint, len(request.history)
        )
        try:
            response = await self._client.post(self._endpoint, json=request.to_payload())
        except httpx.HTTPError as e:
            raise TransportError(str(e) or type(e).__name__) from e

        # A well-formed body wins over the status code: the server reports
        # application failures as {"success": false, "error": ...}
        try:
            return ChatResponse.model_validate_json(response.content)
        except ValidationError as e:
            if response.is_error:
                raise TransportError(
                    f"HTTP {response.status_code} from {response.request.url}"
                ) from e
            raise TransportError(f"Invalid response from server: {e.errors()[0]['msg']}") from e

    async def close(self) -> None:
        await self._client.aclose()
