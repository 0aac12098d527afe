from .base import AITransport
from .factory import create_transport
from .http import HttpTransport
from .models import ChatRequest, ChatResponse

__all__ = [
    "AITransport",
    "create_transport",
    "ChatRequest",
    "ChatResponse",
    "HttpTransport",
]
