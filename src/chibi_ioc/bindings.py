"""
Binding records stored in the registry.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any

FACTORY_SUFFIX = "Factory"


def factory_base_id(id: str) -> str | None:
    """Strip a trailing factory suffix (any case) from ``id``, or return None."""
    if len(id) > len(FACTORY_SUFFIX) and id.lower().endswith(FACTORY_SUFFIX.lower()):
        return id[: -len(FACTORY_SUFFIX)]
    return None


@dataclass
class Binding:
    """
    Maps an id to a constructible type and its resolution policy.

    Bindings are mutable so that the builder returned by ``bind_type`` and
    ``bind_singleton`` can configure the record after it was registered.
    """

    id: str
    type: type | Callable[..., Any]
    singleton: bool = False
    group_id: str | None = None
    unique_instance: bool = False

    def instance_key(self) -> Hashable:
        """
        Key under which a singleton instance of this binding is cached.

        Bindings sharing a type share one instance unless marked unique.
        """
        if self.unique_instance:
            return (self.type, self.id)
        return self.type

    def __str__(self) -> str:
        impl_name = getattr(self.type, "__name__", str(self.type))
        policy = "singleton" if self.singleton else "type"
        group_str = f" [{self.group_id}]" if self.group_id else ""
        return f"{self.id} -> {impl_name}{group_str} ({policy})"
