from abc import ABC, abstractmethod
from typing import Any

from .models import ChatRequest, ChatResponse


class AITransport(ABC):
    """Abstract base class for AI transports.

    This module hides the design decision of how the assistant reaches its
    backend. Implementations must:
    - Return a ChatResponse for anything the backend answered, including
      ``success=False``
    - Raise TransportError when no usable response was received

    Supports async context manager protocol for proper resource cleanup:
        async with transport:
            response = await transport.chat(request)
    """

    @abstractmethod
    async def chat(self, request: ChatRequest) -> ChatResponse:
        """Send one chat request and wait for the backend's answer.

        Args:
            request: The message plus recent conversation context

        Returns:
            ChatResponse as reported by the backend

        Raises:
            TransportError: Network, HTTP or decoding failure
        """

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""

    async def __aenter__(self) -> "AITransport":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()
