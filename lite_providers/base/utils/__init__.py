"""Small provider-agnostic utilities."""

from .messages import split_system_messages

__all__ = ["split_system_messages"]
