"""
Exceptions raised by the container.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def format_chain(chain: Sequence[str]) -> str:
    """Render a resolve chain as ``a -> b -> c``."""
    return " -> ".join(chain)


class IocError(Exception):
    """Base class for every error raised by chibi-ioc."""


class ConfigurationError(IocError):
    """Raised when a binding is configured incorrectly."""


class CircularDependencyError(IocError):
    """Raised when resolution revisits an id that is still being resolved."""

    def __init__(self, chain: Sequence[str]):
        self.chain = tuple(chain)
        super().__init__(f"Circular dependency detected. Resolve chain: {format_chain(self.chain)}")


class UnresolvedDependencyError(IocError):
    """Raised when an id matches no binding, factory form or group."""

    def __init__(self, id: str, chain: Sequence[str] = ()):
        self.id = id
        self.chain = tuple(chain)
        msg = f"Error resolving service '{id}'"
        if self.chain:
            msg += f" (resolve chain: {format_chain((*self.chain, id))})"
        super().__init__(msg)


class InvalidTypeError(IocError):
    """Raised when ``resolve_type`` is given something that cannot be constructed."""

    def __init__(self, type_: Any):
        self.type = type_
        super().__init__(f"Invalid type {type_!r}")


class UnregisteredTypeError(IocError):
    """Raised when ``resolve_type`` is given a type no binding refers to."""

    def __init__(self, type_: Any):
        self.type = type_
        type_name = getattr(type_, "__name__", str(type_))
        super().__init__(f"Type {type_name} was not registered in this container")
