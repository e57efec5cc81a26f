"""Process entry point: `docker-credential-env <store|get|erase|list|version>`."""
from __future__ import annotations

import sys

from . import NAME
from .cli import parse_args
from .logging_conf import setup_logging
from .protocol.dispatch import serve
from .service.helper import EnvHelper


def main(argv: list[str] | None = None) -> None:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    setup_logging(args.log_level)
    code = serve(
        EnvHelper(),
        args.action,
        prog=NAME,
        stdin=sys.stdin,
        stdout=sys.stdout,
    )
    raise SystemExit(code)


if __name__ == "__main__":
    main()
