"""Function registry and the descriptors advertised to the model."""

from dataclasses import dataclass
from typing import Callable, Optional

from quizcall.errors import UnknownFunction


@dataclass(frozen=True)
class FunctionDescriptor:
    """Schema-shaped metadata advertised to the model for one function."""

    name: str
    description: str
    parameters: Optional[dict] = None  # JSON Schema for parameters

    def to_function_schema(self) -> dict:
        """Convert to an OpenAI ``functions`` entry."""
        schema = {"name": self.name, "description": self.description}
        if self.parameters is not None:
            schema["parameters"] = self.parameters
        return schema

    def to_tool_schema(self) -> dict:
        """Convert to Ollama tool schema format."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameters
                or {"type": "object", "properties": {}},
            },
        }


class FunctionRegistry:
    """Maps function names to local callables.

    Descriptors are supplied by the integrator and kept alongside the
    callables; nothing checks that the two agree.
    """

    def __init__(self, descriptors: Optional[list[FunctionDescriptor]] = None):
        self._functions: dict[str, Callable] = {}
        self._descriptors: list[FunctionDescriptor] = list(descriptors or [])

    def register(self, name: str, fn: Callable):
        """Register (or replace) the callable for ``name``."""
        self._functions[name] = fn

    def advertise(self, descriptor: FunctionDescriptor):
        """Add a descriptor to the list sent to the model."""
        self._descriptors.append(descriptor)

    def resolve(self, name: str) -> Callable:
        """Get a function by name, raising UnknownFunction if missing."""
        try:
            return self._functions[name]
        except KeyError:
            raise UnknownFunction(name) from None

    def describe(self) -> list[FunctionDescriptor]:
        """Get the advertised descriptors in registration order."""
        return list(self._descriptors)

    def get_all_names(self) -> list[str]:
        """Get all registered function names."""
        return list(self._functions.keys())

    def __contains__(self, name: str) -> bool:
        return name in self._functions
