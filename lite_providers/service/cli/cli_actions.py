"""Subcommand handlers for providers-cli.

Each handler takes the parsed namespace and returns a process exit code.
Provider errors print a single line to stderr and return 1. A
``ProviderManager`` may be injected (tests pass one backed by a mock
transport); otherwise a fresh one is created per invocation.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Any, Awaitable, Callable, Dict, Optional

from ...base.dto import parse_chat_request, parse_completion_request
from ...base.errors import ProviderError
from ...base.factory import validate_config
from ...base.http import aclose_all_clients
from ...base.manager import ProviderManager
from ...base.models import ProviderConfig
from ...base.streaming import accumulate_chunks
from ...config import get_model, load_provider_config


def _fail(exc: ProviderError) -> int:
    print(f"error: {exc.message}", file=sys.stderr)
    return 1


def _run(coro_fn: Callable[[], Awaitable[int]]) -> int:
    async def _main() -> int:
        try:
            return await coro_fn()
        finally:
            await aclose_all_clients()

    try:
        return asyncio.run(_main())
    except ProviderError as exc:
        return _fail(exc)


def _config(args: argparse.Namespace) -> ProviderConfig:
    return load_provider_config(args.provider)


def _model(args: argparse.Namespace) -> Optional[str]:
    return args.model or get_model(args.provider)


def _sampling(args: argparse.Namespace) -> Dict[str, Any]:
    return {k: v for k, v in {"max_tokens": args.max_tokens, "temperature": args.temperature}.items() if v is not None}


def handle_validate(args: argparse.Namespace) -> int:
    try:
        result = validate_config(_config(args))
    except ProviderError as exc:
        return _fail(exc)
    if result.valid:
        print(json.dumps({"provider": args.provider, "valid": True}))
        return 0
    print(json.dumps({"provider": args.provider, "valid": False, "errors": result.errors}))
    return 1


def handle_models(args: argparse.Namespace, manager: Optional[ProviderManager] = None) -> int:
    mgr = manager or ProviderManager()

    async def _go() -> int:
        models = await mgr.get_models(_config(args), use_cache=not args.refresh)
        if args.json:
            print(json.dumps([m.to_dict() for m in models]))
        else:
            for m in models:
                print(f"{m.id}\t{m.name}\t{m.context_window}")
        return 0

    return _run(_go)


def handle_chat(args: argparse.Namespace, manager: Optional[ProviderManager] = None) -> int:
    mgr = manager or ProviderManager()
    messages = []
    if args.system:
        messages.append({"role": "system", "content": args.system})
    messages.append({"role": "user", "content": args.prompt})
    try:
        request = parse_chat_request({"model": _model(args) or "", "messages": messages, **_sampling(args)})
    except ProviderError as exc:
        return _fail(exc)

    async def _go() -> int:
        config = _config(args)
        if args.stream:
            if args.json:
                result = await accumulate_chunks(mgr.create_chat_completion_stream(config, request))
                print(json.dumps({"content": result.text, "finish_reason": result.finish_reason}))
                return 0
            async for chunk in mgr.create_chat_completion_stream(config, request):
                print(chunk.delta, end="", flush=True)
            print()
            return 0
        response = await mgr.create_chat_completion(config, request)
        print(json.dumps(response.to_dict()) if args.json else response.content)
        return 0

    return _run(_go)


def handle_complete(args: argparse.Namespace, manager: Optional[ProviderManager] = None) -> int:
    mgr = manager or ProviderManager()
    try:
        request = parse_completion_request({"model": _model(args) or "", "prompt": args.prompt, **_sampling(args)})
    except ProviderError as exc:
        return _fail(exc)

    async def _go() -> int:
        config = _config(args)
        if args.stream:
            async for chunk in mgr.create_completion_stream(config, request):
                print(chunk.delta, end="", flush=True)
            print()
            return 0
        response = await mgr.create_completion(config, request)
        print(json.dumps(response.to_dict()) if args.json else response.text)
        return 0

    return _run(_go)


__all__ = ["handle_validate", "handle_models", "handle_chat", "handle_complete"]
