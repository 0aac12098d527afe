from typing import Any

from .base import AITransport


def create_transport(kind: str = "http", **config: Any) -> AITransport:
    """Create an AI transport instance.

    Args:
        kind: Transport type ('http')
        **config: Transport-specific configuration
            For HTTP:
                - base_url: str (default: 'http://localhost:8080')
                - endpoint: str (default: '/ai/chat')
                - timeout: float | None (default: None)

    Returns:
        Initialized transport instance

    Raises:
        ValueError: If transport type is not supported

    Examples:
        >>> transport = create_transport("http", base_url="http://localhost:8080")
    """
    kind_lower = kind.lower()

    if kind_lower == "http":
        from .http import HttpTransport
        return HttpTransport(**config)

    raise ValueError(
        f"Unsupported transport: {kind}. "
        f"Supported transports: 'http'"
    )
