"""providers-cli (package entrypoint).

Wires argument parsing to the handlers in ``cli_actions``; performs no
provider logic directly.
"""

from __future__ import annotations

import sys
from typing import Optional

from ...base.logging import configure_logger
from .cli_actions import handle_chat, handle_complete, handle_models, handle_validate
from .cli_parser import build_parser


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entrypoint.

    Parameters
    ----------
    argv: Optional[list[str]]
        Argument vector; when ``None`` uses ``sys.argv[1:]``.

    Returns
    -------
    int
        Process exit code (0 success, 1 on error).
    """
    args = build_parser().parse_args(list(sys.argv[1:] if argv is None else argv))
    if args.log_level:
        configure_logger(level=args.log_level)
    if args.cmd == "validate":
        return handle_validate(args)
    if args.cmd == "models":
        return handle_models(args)
    if args.cmd == "chat":
        return handle_chat(args)
    return handle_complete(args)


__all__ = ["main"]


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
