"""Ollama API wrapper exposing the same completion interface as the OpenAI client."""

import json
import logging
from typing import Optional

import httpx
import ollama

from quizcall.config import (
    CONNECT_TIMEOUT,
    OLLAMA_HOST,
    OLLAMA_KEEP_ALIVE,
    OLLAMA_MODEL,
    OLLAMA_OPTIONS,
    REQUEST_TIMEOUT,
)
from quizcall.errors import RemoteCallFailed
from quizcall.functions.registry import FunctionDescriptor
from quizcall.messages import ConversationMessage, FunctionCall, ModelResponseMessage

logger = logging.getLogger(__name__)


class OllamaChatClient:
    """Completion client for a local Ollama server.

    Functions are advertised as tools and the first tool call comes back as a
    ``FunctionCall``. Each request is a single attempt.
    """

    def __init__(self, model: Optional[str] = None, client: Optional[ollama.Client] = None):
        """Build the SDK client once, bounding the transport with ``httpx.Timeout``."""
        self.model = model or OLLAMA_MODEL
        self._client = client or ollama.Client(
            host=OLLAMA_HOST,
            timeout=httpx.Timeout(REQUEST_TIMEOUT, connect=CONNECT_TIMEOUT),
        )

    def complete(
        self,
        conversation: list[ConversationMessage],
        descriptors: Optional[list[FunctionDescriptor]] = None,
    ) -> ModelResponseMessage:
        """Send a chat request to Ollama.

        Args:
            conversation: Messages to send, in order
            descriptors: Optional functions to advertise as tools

        Returns:
            ModelResponseMessage built from the first tool call, if any
        """
        kwargs = {
            "model": self.model,
            "messages": [message.to_dict() for message in conversation],
            "options": OLLAMA_OPTIONS,
            "keep_alive": OLLAMA_KEEP_ALIVE,
        }
        if descriptors:
            kwargs["tools"] = [d.to_tool_schema() for d in descriptors]

        try:
            response = self._client.chat(**kwargs)
        except (ollama.ResponseError, httpx.HTTPError, ConnectionError) as e:
            logger.error(f"Ollama API error: {e}")
            raise RemoteCallFailed(str(e)) from e

        message = response.message
        if not message.tool_calls:
            return ModelResponseMessage(content=message.content)

        # Ollama decodes arguments itself; re-encode so dispatch sees one format
        call = message.tool_calls[0]
        return ModelResponseMessage(
            content=message.content,
            function_call=FunctionCall(
                name=call.function.name,
                arguments=json.dumps(dict(call.function.arguments or {})),
            ),
        )
