"""Turns a model response into a ready-to-invoke local call.

The interpreter never calls anything itself: it parses the function call
directive, resolves the target against the registry and hands back a
zero-argument ``Handler`` for the caller to invoke.
"""

import functools
import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol

from quizcall.errors import MalformedArguments, UnknownFunction
from quizcall.functions.registry import FunctionDescriptor, FunctionRegistry
from quizcall.messages import ConversationMessage, ModelResponseMessage, build_conversation

logger = logging.getLogger(__name__)

# positional: argument values in the order the model emitted their keys
# keyword: arguments bound by parameter name
BINDINGS = ("positional", "keyword")


class ChatClient(Protocol):
    def complete(
        self,
        conversation: list[ConversationMessage],
        descriptors: Optional[list[FunctionDescriptor]] = None,
    ) -> ModelResponseMessage: ...


@dataclass(frozen=True)
class Handler:
    """Deferred unit of work produced by ``interpret``."""

    action: Callable[[], Any]
    function_name: Optional[str] = None

    def __call__(self) -> Any:
        return self.action()

    @property
    def dispatches(self) -> bool:
        """True when invoking the handler calls a registered function."""
        return self.function_name is not None


def _emitter(content: Optional[str]) -> Callable[[], None]:
    def emit():
        if content is not None:
            print(content)

    return emit


def parse_arguments(arguments_json: str) -> dict:
    """Decode the model's argument payload, which must be a JSON object."""
    try:
        arguments = json.loads(arguments_json)
    except (json.JSONDecodeError, TypeError) as e:
        raise MalformedArguments(f"Invalid function arguments: {e}") from e
    if not isinstance(arguments, dict):
        raise MalformedArguments(
            f"Function arguments must be a JSON object, got {type(arguments).__name__}"
        )
    return arguments


def interpret(
    message: ModelResponseMessage,
    registry: FunctionRegistry,
    binding: str = "positional",
) -> Handler:
    """Build the handler for a model response.

    Without a function call the handler prints the text content (or nothing).
    With one, arguments are parsed before the function is looked up, so a
    malformed payload fails first. Under positional binding the call is
    only correct when the model's key order matches the parameter order.

    Raises:
        MalformedArguments: payload is not a JSON object
        UnknownFunction: the named function is not registered
    """
    if binding not in BINDINGS:
        raise ValueError(f"Unknown binding: {binding}")

    call = message.function_call
    if call is None:
        logger.debug("No function call in response, emitting text")
        return Handler(_emitter(message.content))

    arguments = parse_arguments(call.arguments)
    try:
        fn = registry.resolve(call.name)
    except UnknownFunction:
        logger.warning(f"Model returned unknown function: {call.name}")
        raise

    logger.info(f"Dispatching to {call.name} with {len(arguments)} argument(s)")
    if binding == "keyword":
        return Handler(functools.partial(fn, **arguments), call.name)
    return Handler(functools.partial(fn, *arguments.values()), call.name)


def get_interpreted_handler(
    user_input: str,
    system_message: str,
    registry: FunctionRegistry,
    client: ChatClient,
    binding: str = "positional",
) -> Handler:
    """Complete a single system + user turn and interpret the reply."""
    conversation = build_conversation(system_message, user_input)
    message = client.complete(conversation, registry.describe())
    return interpret(message, registry, binding=binding)
