"""Message types exchanged with the chat-completion endpoint."""

from dataclasses import dataclass
from typing import Optional

ROLES = ("system", "user", "assistant")


@dataclass(frozen=True)
class ConversationMessage:
    """A single outbound chat message."""

    role: str
    content: str

    def __post_init__(self):
        if self.role not in ROLES:
            raise ValueError(f"Invalid role: {self.role}")

    def to_dict(self) -> dict:
        return {"role": self.role, "content": self.content}


@dataclass(frozen=True)
class FunctionCall:
    """A function call directive returned by the model."""

    name: str
    arguments: str  # JSON-encoded argument object, as sent by the model


@dataclass(frozen=True)
class ModelResponseMessage:
    """The first choice's message from a completion."""

    content: Optional[str] = None
    function_call: Optional[FunctionCall] = None


def build_conversation(system_message: str, user_input: str) -> list[ConversationMessage]:
    """Build the system + user conversation sent for a single turn."""
    return [
        ConversationMessage(role="system", content=system_message),
        ConversationMessage(role="user", content=user_input),
    ]
