"""Conversation data models shared by the session, storage and transport layers."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Author of a message."""

    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """One turn in the conversation.

    Messages are immutable; the session log orders them by insertion.
    """

    model_config = ConfigDict(frozen=True)

    role: Role = Field(description="Who authored the message")
    content: str = Field(description="Raw text as sent or received")

    def to_wire(self) -> dict[str, str]:
        """Plain ``{role, content}`` mapping used in requests and persisted history."""
        return {"role": self.role.value, "content": self.content}
