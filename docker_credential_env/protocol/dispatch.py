from __future__ import annotations

import json
from collections.abc import Callable
from typing import TextIO

from pydantic import ValidationError

from .. import NAME, PACKAGE, __version__
from ..domain.credentials import HelperError
from ..logging_conf import get_logger
from ..service.helper import EnvHelper
from .models import Credentials

__all__ = [
    "ACTIONS",
    "ProtocolError",
    "MissingServerURLError",
    "MissingUsernameError",
    "MalformedRequestError",
    "UnknownActionError",
    "handle_command",
    "serve",
]

logger = get_logger("protocol")

ACTIONS = ("store", "get", "erase", "list", "version")


# ------------------------
# Errors
# ------------------------
class ProtocolError(HelperError):
    code = "protocol_error"


class MissingServerURLError(ProtocolError):
    code = "missing_server_url"

    def __init__(self) -> None:
        super().__init__("no credentials server URL")


class MissingUsernameError(ProtocolError):
    code = "missing_username"

    def __init__(self) -> None:
        super().__init__("no credentials username")


class MalformedRequestError(ProtocolError):
    code = "malformed_request"


class UnknownActionError(ProtocolError):
    code = "unknown_action"

    def __init__(self, action: str) -> None:
        self.action = action
        super().__init__(f"{NAME}: unknown action: {action}")


# ------------------------
# Actions
# ------------------------

def _summarize(e: ValidationError) -> str:
    """Flatten validation errors onto one line; stdout replies are single-line."""
    return "; ".join(
        f"{'.'.join(map(str, err['loc'])) or 'payload'}: {err['msg']}" for err in e.errors()
    )


def _read_server_url(stdin: TextIO) -> str:
    server_url = stdin.read().strip()
    if not server_url:
        raise MissingServerURLError()
    return server_url


def _store(helper: EnvHelper, stdin: TextIO, stdout: TextIO) -> None:
    """Decode a Credentials document and hand it to the helper."""
    raw = stdin.read()
    try:
        creds = Credentials.model_validate_json(raw)
    except ValidationError as e:
        raise MalformedRequestError(f"invalid credentials payload: {_summarize(e)}") from e
    if not creds.server_url:
        raise MissingServerURLError()
    if not creds.username:
        raise MissingUsernameError()
    helper.add(creds)


def _get(helper: EnvHelper, stdin: TextIO, stdout: TextIO) -> None:
    """Write the credentials for the server URL read from stdin."""
    server_url = _read_server_url(stdin)
    username, secret = helper.get(server_url)
    resp = Credentials(server_url=server_url, username=username, secret=secret)
    stdout.write(resp.to_wire() + "\n")


def _erase(helper: EnvHelper, stdin: TextIO, stdout: TextIO) -> None:
    helper.delete(_read_server_url(stdin))


def _list(helper: EnvHelper, stdin: TextIO, stdout: TextIO) -> None:
    accounts = helper.list()
    stdout.write(json.dumps(accounts, sort_keys=True, separators=(",", ":")) + "\n")


def _version(helper: EnvHelper, stdin: TextIO, stdout: TextIO) -> None:
    stdout.write(f"{NAME} ({PACKAGE}) {__version__}\n")


_HANDLERS: dict[str, Callable[[EnvHelper, TextIO, TextIO], None]] = {
    "store": _store,
    "get": _get,
    "erase": _erase,
    "list": _list,
    "version": _version,
}


def handle_command(helper: EnvHelper, action: str, stdin: TextIO, stdout: TextIO) -> None:
    """Run one protocol action against the helper.

    Raises:
        UnknownActionError: for an action outside ACTIONS.
        HelperError: whatever the action itself reports.
    """
    handler = _HANDLERS.get(action)
    if handler is None:
        raise UnknownActionError(action)
    handler(helper, stdin, stdout)


def serve(
    helper: EnvHelper, args: list[str], *, prog: str, stdin: TextIO, stdout: TextIO
) -> int:
    """Dispatch a single invocation and return the process exit code.

    Errors are reported on stdout as one line, followed by exit code 1.
    """
    try:
        if len(args) != 1:
            raise ProtocolError(f"Usage: {prog} <{'|'.join(ACTIONS)}>")
        handle_command(helper, args[0], stdin, stdout)
    except HelperError as e:
        logger.info(
            "protocol.error",
            extra={"event": "protocol_error", "error_code": e.code, "error": str(e)},
        )
        stdout.write(" ".join(str(e).splitlines()) + "\n")
        return 1
    return 0
