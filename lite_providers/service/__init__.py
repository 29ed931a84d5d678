"""Service layer: chat session orchestration and the command-line interface."""

from .chat_session import ChatSession

__all__ = ["ChatSession"]
