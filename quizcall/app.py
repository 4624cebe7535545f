"""Entry point - sends one utterance to the model and runs the chosen function."""

import argparse
import json
import logging
import os
import sys
from typing import Optional

from dotenv import load_dotenv

from quizcall.config import (
    BACKENDS,
    DEFAULT_BACKEND,
    DEFAULT_USER_INPUT,
    ENV_BACKEND,
    ENV_USER_INPUT,
    SYSTEM_PROMPT_TEMPLATE,
)
from quizcall.errors import FunctionCallingError
from quizcall.functions import QuizStore, build_registry
from quizcall.interpreter import BINDINGS, ChatClient, get_interpreted_handler

logger = logging.getLogger(__name__)


def render_system_prompt(function_names: list[str]) -> str:
    """Fill the system prompt with the names of the callable functions."""
    return SYSTEM_PROMPT_TEMPLATE.format(functions=", ".join(function_names))


def build_client(backend: str, model: Optional[str] = None) -> ChatClient:
    """Create the completion client for ``backend``."""
    if backend == "openai":
        from quizcall.openai_client import OpenAIChatClient

        return OpenAIChatClient(model=model)
    if backend == "ollama":
        from quizcall.ollama_client import OllamaChatClient

        return OllamaChatClient(model=model)
    raise ValueError(f"Unknown backend: {backend}")


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="quizcall",
        description="Ask a chat model to create quizzes through function calling",
    )
    parser.add_argument(
        "user_input",
        nargs="?",
        default=None,
        help=f"Utterance to send (default: ${ENV_USER_INPUT} or a built-in example)",
    )
    parser.add_argument(
        "--backend",
        choices=BACKENDS,
        default=os.getenv(ENV_BACKEND, DEFAULT_BACKEND),
        help="Chat-completion backend",
    )
    parser.add_argument("--model", default=None, help="Override the backend's model")
    parser.add_argument(
        "--binding",
        choices=BINDINGS,
        default="positional",
        help="How function arguments are bound to parameters",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)
    # choices are not checked against a default taken from the environment
    if args.backend not in BACKENDS:
        parser.error(
            f"invalid backend from ${ENV_BACKEND}: {args.backend!r} "
            f"(choose from {', '.join(BACKENDS)})"
        )
    return args


def run(
    user_input: str,
    client: ChatClient,
    store: QuizStore,
    binding: str = "positional",
) -> None:
    """Run one request against ``client`` and print the outcome."""
    registry = build_registry(store)
    system_message = render_system_prompt(registry.get_all_names())

    handler = get_interpreted_handler(
        user_input=user_input,
        system_message=system_message,
        registry=registry,
        client=client,
        binding=binding,
    )
    handler()
    if handler.dispatches:
        print(json.dumps(store.get_quizzes(), indent=2))


def main(argv: Optional[list[str]] = None) -> int:
    load_dotenv()
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    user_input = args.user_input or os.getenv(ENV_USER_INPUT) or DEFAULT_USER_INPUT
    try:
        client = build_client(args.backend, args.model)
        run(user_input, client, QuizStore(), binding=args.binding)
    except FunctionCallingError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
