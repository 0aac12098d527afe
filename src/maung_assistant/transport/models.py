"""Wire models for the AI chat endpoint."""

from pydantic import BaseModel, ConfigDict, Field

from ..models import Message


class ChatRequest(BaseModel):
    """Request body sent to the AI backend."""

    model_config = ConfigDict(frozen=True)

    message: str = Field(description="The user's message")
    history: list[Message] = Field(
        default_factory=list,
        description="Recent conversation, oldest first"
    )

    def to_payload(self) -> dict:
        return {
            "message": self.message,
            "history": [m.to_wire() for m in self.history],
        }


class ChatResponse(BaseModel):
    """Response from the AI backend.

    ``success=False`` is an application-level failure; transport failures
    never produce a ChatResponse.
    """

    model_config = ConfigDict(frozen=True)

    success: bool
    reply: str | None = Field(default=None, description="Assistant reply on success")
    error: str | None = Field(default=None, description="Server error text on failure")
