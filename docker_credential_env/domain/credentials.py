from __future__ import annotations

from dataclasses import dataclass

from .environment import Environment, default_environment
from .servers import (
    ENV_PREFIX,
    PASSWORD_SUFFIX,
    USER_SUFFIX,
    denormalize_server_name,
    env_var_name,
    is_normalized,
    normalize_server_name,
)

__all__ = [
    "HelperError",
    "CredentialsNotFoundError",
    "CredentialPair",
    "credentials_for_server",
    "credentials_for_token",
    "list_credentials",
]


# ------------------------
# Errors
# ------------------------
class HelperError(Exception):
    """Base class for errors reported back to the credential host.

    The `code` attribute is a stable machine code for logs.
    """

    code: str = "helper_error"


class CredentialsNotFoundError(HelperError):
    """No usable USER/PASSWORD variable pair exists for a server."""

    code = "credentials_not_found"

    def __init__(self, server_url: str, user_env: str, password_env: str) -> None:
        self.server_url = server_url
        self.user_env = user_env
        self.password_env = password_env
        super().__init__(
            f"credentials for {server_url} not found in environment variables "
            f"{user_env} and {password_env}"
        )


# ------------------------
# Schema
# ------------------------
@dataclass(frozen=True)
class CredentialPair:
    """A username (never empty) and password (may be empty)."""

    username: str
    password: str


# ------------------------
# Lookup
# ------------------------

def credentials_for_token(
    token: str, env: Environment | None = None, *, server_url: str | None = None
) -> CredentialPair:
    """Read the USER/PASSWORD variables for an already-normalized token.

    The username must be non-empty. The password must be present but may be
    empty, so "blank password" stays distinguishable from "typo in the
    variable name".

    Raises:
        CredentialsNotFoundError: naming both variables that were checked.
    """
    if env is None:
        env = default_environment()

    user_env = env_var_name(token, USER_SUFFIX)
    password_env = env_var_name(token, PASSWORD_SUFFIX)

    user = env.lookup(user_env)
    password = env.lookup(password_env)

    if not user or password is None:
        raise CredentialsNotFoundError(
            server_url if server_url is not None else token, user_env, password_env
        )

    return CredentialPair(username=user, password=password)


def credentials_for_server(server_url: str, env: Environment | None = None) -> CredentialPair:
    """Look up the credential pair for a server URL or host."""
    token = normalize_server_name(server_url)
    return credentials_for_token(token, env, server_url=server_url)


def list_credentials(env: Environment | None = None) -> dict[str, str]:
    """Map display server names to usernames for every complete pair.

    Scans for `DOCKER_CREDENTIALS_ENV_<TOKEN>_USER`, keeps tokens that a forward
    lookup could produce and whose pair passes `credentials_for_token`.
    Passwords are never returned. Display names are best-effort (see
    `denormalize_server_name`); colliding names keep the last one scanned.
    """
    if env is None:
        env = default_environment()

    head = f"{ENV_PREFIX}_"
    tail = f"_{USER_SUFFIX}"

    out: dict[str, str] = {}
    for name, _ in env.items():
        if not (name.startswith(head) and name.endswith(tail)):
            continue
        if len(name) <= len(head) + len(tail):
            continue

        token = name[len(head) : -len(tail)]
        if not is_normalized(token):
            continue

        try:
            pair = credentials_for_token(token, env)
        except CredentialsNotFoundError:
            continue

        out[denormalize_server_name(token)] = pair.username

    return out
