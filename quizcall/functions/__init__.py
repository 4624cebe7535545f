"""Function registry initialization."""

from quizcall.functions import quiz
from quizcall.functions.registry import FunctionRegistry, FunctionDescriptor
from quizcall.functions.quiz import QuizStore


def build_registry(store: QuizStore) -> FunctionRegistry:
    """Register all functions against ``store`` in a fresh registry."""
    registry = FunctionRegistry()
    quiz.register(registry, store)
    return registry


__all__ = ["FunctionRegistry", "FunctionDescriptor", "QuizStore", "build_registry"]
