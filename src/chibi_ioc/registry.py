"""
Binding registry: the mutable id -> binding store behind a container.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from .bindings import Binding


class BindingRegistry:
    """
    Stores bindings by id, preserving registration order.

    Registering an id that is already present replaces its binding; the id
    keeps its original position in iteration order.
    """

    def __init__(self) -> None:
        self._bindings: dict[str, Binding] = {}

    def add(self, binding: Binding) -> None:
        """Register a binding, replacing any binding with the same id."""
        self._bindings[binding.id] = binding

    def get(self, id: str) -> Binding | None:
        """Get a binding by id."""
        return self._bindings.get(id)

    def by_group(self, group_id: str) -> list[Binding]:
        """Get all bindings that are members of ``group_id``, in registration order."""
        return [binding for binding in self._bindings.values() if binding.group_id == group_id]

    def first_of_type(self, target_type: Any) -> Binding | None:
        """Get the first registered binding whose type is ``target_type``."""
        for binding in self._bindings.values():
            if binding.type is target_type:
                return binding
        return None

    def clear(self) -> None:
        """Remove every binding."""
        self._bindings.clear()

    def __contains__(self, id: object) -> bool:
        return id in self._bindings

    def __iter__(self) -> Iterator[Binding]:
        return iter(list(self._bindings.values()))

    def __len__(self) -> int:
        return len(self._bindings)
