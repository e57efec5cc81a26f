"""Docker credential helper backed by environment variables.

Exposes the name, package and distribution version used by the `version`
action.
"""
from importlib.metadata import PackageNotFoundError, version

NAME = "docker-credential-env"
PACKAGE = "github.com/jamestelfer/docker-credential-env"

try:  # Resolves once installed; source checkouts fall back to a placeholder.
    __version__ = version(NAME)
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"
