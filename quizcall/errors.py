"""Errors raised while completing and dispatching a function call."""


class FunctionCallingError(Exception):
    """Base class for quizcall errors."""


class RemoteCallFailed(FunctionCallingError, RuntimeError):
    """The chat-completion endpoint could not be reached or rejected the request."""


class MalformedArguments(FunctionCallingError, ValueError):
    """The model returned an argument payload that is not a JSON object."""


class UnknownFunction(FunctionCallingError, KeyError):
    """The model asked for a function that is not registered."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown function: {self.name}"
