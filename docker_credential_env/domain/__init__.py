"""Pure domain logic: server-name normalization, environment access, lookup.

These modules are free of protocol and I/O concerns so they can be
unit-tested against an injected environment.
"""
__all__ = ["servers", "environment", "credentials"]
