"""Exception hierarchy for the assistant.

Application-level failures reported by the backend are not exceptions: they
arrive as a ``ChatResponse`` with ``success=False``.
"""


class AssistantError(Exception):
    """Base class for assistant errors."""


class TransportError(AssistantError):
    """The AI backend could not be reached or returned an unusable response."""


class StorageError(AssistantError):
    """The key-value storage backend failed."""
