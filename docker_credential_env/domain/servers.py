from __future__ import annotations

import re

__all__ = [
    "DEFAULT_REGISTRY_URL",
    "DEFAULT_REGISTRY_TOKEN",
    "ENV_PREFIX",
    "USER_SUFFIX",
    "PASSWORD_SUFFIX",
    "normalize_server_name",
    "denormalize_server_name",
    "is_normalized",
    "env_var_name",
]

# Docker Hub is requested by this URL; no other registry may use it.
DEFAULT_REGISTRY_URL = "https://index.docker.io/v1"
DEFAULT_REGISTRY_TOKEN = "INDEX_DOCKER_IO"

ENV_PREFIX = "DOCKER_CREDENTIALS_ENV"
USER_SUFFIX = "USER"
PASSWORD_SUFFIX = "PASSWORD"

_NON_ALNUM_RE = re.compile(r"[^a-zA-Z0-9]")


def normalize_server_name(server_url: str) -> str:
    """Convert a server URL or host into a token usable in a variable name.

    Rules:
    - Anything starting with the Docker Hub URL maps to INDEX_DOCKER_IO,
      whatever path or slash follows.
    - Otherwise every non-alphanumeric character becomes "_", underscores are
      trimmed from both ends and the result is uppercased.

    Never fails. Input made only of symbols yields an empty string. Distinct
    inputs may collide ("example.com:8080" and "example.com_8080").
    """
    if server_url.startswith(DEFAULT_REGISTRY_URL):
        return DEFAULT_REGISTRY_TOKEN

    return _NON_ALNUM_RE.sub("_", server_url).strip("_").upper()


def denormalize_server_name(token: str) -> str:
    """Best-effort display form of a token: lowercase with "_" read as ".".

    Lossy: ":" and "/" cannot be recovered. Only used to label list output,
    never to look credentials up.
    """
    server = token.lower().replace("_", ".")
    if server == DEFAULT_REGISTRY_TOKEN.lower().replace("_", "."):
        return DEFAULT_REGISTRY_URL
    return server


def is_normalized(token: str) -> bool:
    """Return True if `token` is a non-empty output of normalize_server_name."""
    return bool(token) and normalize_server_name(token) == token


def env_var_name(token: str, suffix: str) -> str:
    """Name of the variable holding `suffix` (USER or PASSWORD) for a token."""
    return f"{ENV_PREFIX}_{token}_{suffix}"
