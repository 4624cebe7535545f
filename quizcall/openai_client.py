"""OpenAI chat-completion client advertising functions to the model."""

import logging
from typing import Optional

import httpx
import openai

from quizcall.config import CONNECT_TIMEOUT, FUNCTION_CALL_MODE, OPENAI_MODEL, REQUEST_TIMEOUT
from quizcall.errors import RemoteCallFailed
from quizcall.functions.registry import FunctionDescriptor
from quizcall.messages import ConversationMessage, FunctionCall, ModelResponseMessage

logger = logging.getLogger(__name__)


class OpenAIChatClient:
    """Single-shot wrapper around ``chat.completions.create``."""

    def __init__(self, model: Optional[str] = None, client: Optional[openai.OpenAI] = None):
        """Initialize the SDK client once for the process lifetime.

        Args:
            model: Override the default model identifier
            client: Pre-built SDK client (or a test double)
        """
        self.model = model or OPENAI_MODEL
        if client is None:
            try:
                client = openai.OpenAI(
                    max_retries=0,
                    timeout=httpx.Timeout(REQUEST_TIMEOUT, connect=CONNECT_TIMEOUT),
                )
            except openai.OpenAIError as e:
                raise RemoteCallFailed(f"Could not create OpenAI client: {e}") from e
        self._client = client

    def complete(
        self,
        conversation: list[ConversationMessage],
        descriptors: Optional[list[FunctionDescriptor]] = None,
    ) -> ModelResponseMessage:
        """Send the conversation and return the first choice's message.

        Function calling is only enabled when ``descriptors`` is non-empty, in
        which case the model picks between a call and a plain answer.
        """
        kwargs = {
            "model": self.model,
            "messages": [message.to_dict() for message in conversation],
        }
        if descriptors:
            kwargs["functions"] = [d.to_function_schema() for d in descriptors]
            kwargs["function_call"] = FUNCTION_CALL_MODE

        logger.debug(
            f"Requesting completion from {self.model} "
            f"({len(conversation)} messages, {len(descriptors or [])} functions)"
        )
        try:
            response = self._client.chat.completions.create(**kwargs)
        except openai.OpenAIError as e:
            logger.error(f"OpenAI API error: {e}")
            raise RemoteCallFailed(str(e)) from e

        if not response.choices:
            raise RemoteCallFailed("Completion returned no choices")
        return _to_response_message(response.choices[0].message)


def _to_response_message(message) -> ModelResponseMessage:
    function_call = getattr(message, "function_call", None)
    if function_call is None:
        return ModelResponseMessage(content=message.content)
    return ModelResponseMessage(
        content=message.content,
        function_call=FunctionCall(
            name=function_call.name,
            arguments=function_call.arguments,
        ),
    )
