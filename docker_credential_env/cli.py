from __future__ import annotations

import argparse
import os

from .protocol.dispatch import ACTIONS


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse CLI arguments for the credential helper.

    The action is collected as a list so the dispatcher, not argparse, reports
    a wrong argument count in the protocol's own format.
    """
    parser = argparse.ArgumentParser(
        prog="docker-credential-env",
        description="Docker credential helper reading credentials from environment variables",
    )
    parser.add_argument("action", nargs="*", help=f"one of: {', '.join(ACTIONS)}")
    parser.add_argument("--log-level", default=os.getenv("LOG_LEVEL", "INFO"))
    return parser.parse_args(argv)
