from __future__ import annotations

from enum import Enum

from ..domain.credentials import (
    CredentialsNotFoundError,
    credentials_for_server,
    list_credentials,
)
from ..domain.environment import Environment, default_environment
from ..logging_conf import get_logger
from ..protocol.models import Credentials

logger = get_logger("service.helper")

OPTIONAL_ENV = "DOCKER_CREDENTIALS_ENV_OPTIONAL"


class Outcome(str, Enum):
    not_supported = "not_supported"


def optional_from_env(env: Environment | None = None) -> bool:
    """Return True when DOCKER_CREDENTIALS_ENV_OPTIONAL is "true"."""
    if env is None:
        env = default_environment()
    raw = env.lookup(OPTIONAL_ENV) or ""
    return raw.strip().lower() == "true"


class EnvHelper:
    """Credential helper operations backed by environment variables.

    Storage is not supported: `add` and `delete` report `Outcome.not_supported`
    and leave the environment untouched.
    """

    def __init__(self, env: Environment | None = None, *, optional: bool | None = None) -> None:
        self.env = env if env is not None else default_environment()
        self._optional = optional

    @property
    def optional(self) -> bool:
        # Read per call unless pinned, so a changed environment is honoured.
        if self._optional is not None:
            return self._optional
        return optional_from_env(self.env)

    def get(self, server_url: str) -> tuple[str, str]:
        """Return (username, password) for a server.

        In optional mode a missing pair yields ("", "") so the host falls
        through to its other helpers.
        """
        try:
            pair = credentials_for_server(server_url, self.env)
        except CredentialsNotFoundError as e:
            if self.optional:
                logger.info(
                    "credentials.get_optional_miss",
                    extra={"event": "get", "server_url": server_url, "error": str(e)},
                )
                return "", ""
            logger.info(
                "credentials.get_miss",
                extra={"event": "get", "server_url": server_url, "error": str(e)},
            )
            raise

        logger.info(
            "credentials.get",
            extra={"event": "get", "server_url": server_url, "username": pair.username},
        )
        return pair.username, pair.password

    def add(self, credentials: Credentials) -> Outcome:
        logger.warning(
            "Saving credentials is not supported by docker-credential-env",
            extra={
                "event": "add",
                "server_url": credentials.server_url,
                "username": credentials.username,
            },
        )
        return Outcome.not_supported

    def delete(self, server_url: str) -> Outcome:
        logger.warning(
            "Deleting credentials is not supported by docker-credential-env",
            extra={"event": "delete", "server_url": server_url},
        )
        return Outcome.not_supported

    def list(self) -> dict[str, str]:
        accounts = list_credentials(self.env)
        logger.info("credentials.list", extra={"event": "list", "count": len(accounts)})
        return accounts
