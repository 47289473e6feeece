"""
Fluent builder for configuring bindings.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from .bindings import Binding
from .errors import ConfigurationError

if TYPE_CHECKING:
    from .container import Container


class BindingBuilder:
    """
    Builder returned by ``bind_type`` and ``bind_singleton``.

    The binding is registered before the builder is handed out; every call
    below edits that registered record in place.
    """

    def __init__(self, container: Container, binding: Binding):
        self._container = container
        self._binding = binding

    @property
    def binding(self) -> Binding:
        """The binding this builder configures."""
        return self._binding

    def group_on_id(self, group_id: str) -> BindingBuilder:
        """Make the binding a member of the group ``group_id``."""
        if not isinstance(group_id, str) or not group_id:
            raise ConfigurationError(f"Group id must be a non-empty string, got {group_id!r}")
        self._binding.group_id = group_id
        return self

    def create_unique_instance(self) -> BindingBuilder:
        """
        Give this singleton binding its own instance.

        Without this, singleton bindings of the same type share one instance.
        """
        if not self._binding.singleton:
            raise ConfigurationError(
                f"Cannot set create_unique_instance on non-singleton binding '{self._binding.id}'"
            )
        self._binding.unique_instance = True
        return self

    def bind_type(self, id: str, type_: type | Callable[..., Any]) -> BindingBuilder:
        """Register another binding on the same container, see ``Container.bind_type``."""
        return self._container.bind_type(id, type_)

    def bind_singleton(self, id: str, type_: type | Callable[..., Any]) -> BindingBuilder:
        """Register another singleton on the same container, see ``Container.bind_singleton``."""
        return self._container.bind_singleton(id, type_)
