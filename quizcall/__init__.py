"""Schema-driven dispatch from a chat model's function call to local Python functions."""

__version__ = "0.1.0"
