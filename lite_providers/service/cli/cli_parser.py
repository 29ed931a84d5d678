"""CLI parser construction for providers-cli.

This module wires subparsers but contains no execution logic. Subcommand
handlers live in ``cli_actions``.
"""

from __future__ import annotations

import argparse

from ...base.models import ProviderType
from ...config.defaults import PROVIDER_CLI_DEFAULT_PROVIDER

_PROVIDER_CHOICES = [t.value for t in ProviderType]


def _str2bool(v: str | None) -> bool:
    """Permissive truthy/falsey parsing for ``--stream [VALUE]``."""
    if v is None:
        return True
    val = v.strip().lower()
    if val in {"1", "t", "true", "y", "yes", "on"}:
        return True
    return False if val in {"0", "f", "false", "n", "no", "off"} else bool(val)


def add_stream_flags(parser: argparse.ArgumentParser, default: bool = False) -> None:
    """Attach ``--stream``/``--no-stream``; bare ``--stream`` means true."""
    grp = parser.add_mutually_exclusive_group()
    grp.add_argument("--stream", nargs="?", const=True, type=_str2bool, default=default)
    grp.add_argument("--no-stream", dest="stream", action="store_false")


def _add_provider(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--provider", choices=_PROVIDER_CHOICES, default=PROVIDER_CLI_DEFAULT_PROVIDER)


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level parser with ``models``, ``validate``,
    ``chat`` and ``complete`` subcommands. No I/O happens here.
    """
    p = argparse.ArgumentParser(prog="providers-cli", description="Uniform LLM provider client")
    p.add_argument("--log-level", default=None, help="Override LITE_PROVIDERS_LOG_LEVEL")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_models = sub.add_parser("models", help="List models for a provider")
    _add_provider(p_models)
    p_models.add_argument("--refresh", action="store_true", help="Bypass the model cache")
    p_models.add_argument("--json", action="store_true")

    p_validate = sub.add_parser("validate", help="Check a provider configuration")
    _add_provider(p_validate)

    p_chat = sub.add_parser("chat", help="Run one chat completion")
    _add_provider(p_chat)
    p_chat.add_argument("--model", default=None)
    p_chat.add_argument("--prompt", required=True)
    p_chat.add_argument("--system", default=None)
    p_chat.add_argument("--max-tokens", dest="max_tokens", type=int, default=None)
    p_chat.add_argument("--temperature", type=float, default=None)
    add_stream_flags(p_chat)
    p_chat.add_argument("--json", action="store_true")

    p_complete = sub.add_parser("complete", help="Run one legacy text completion")
    _add_provider(p_complete)
    p_complete.add_argument("--model", default=None)
    p_complete.add_argument("--prompt", required=True)
    p_complete.add_argument("--max-tokens", dest="max_tokens", type=int, default=None)
    p_complete.add_argument("--temperature", type=float, default=None)
    add_stream_flags(p_complete)
    p_complete.add_argument("--json", action="store_true")

    return p


__all__ = ["build_parser", "add_stream_flags"]
