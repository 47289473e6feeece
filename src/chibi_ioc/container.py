"""
Container - binds ids to types and resolves object graphs on demand.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Sequence
from typing import Any

from .bindings import FACTORY_SUFFIX, Binding, factory_base_id
from .core import BindingBuilder
from .errors import (
    CircularDependencyError,
    ConfigurationError,
    InvalidTypeError,
    UnregisteredTypeError,
    UnresolvedDependencyError,
)
from .instances import SingletonInstanceCache
from .introspection import parameter_names as default_parameter_names
from .registry import BindingRegistry

logger = logging.getLogger(__name__)

ParameterNames = Callable[[Any], Sequence[str]]


class Container:
    """
    Dependency injection container resolving dependencies by name.

    A type's dependencies are the names of its constructor parameters. Each
    name is resolved against the container, recursively, when the type is
    resolved. Nothing is validated up front: a missing binding or a cycle is
    only reported when a resolution actually reaches it.

    Example:
        ```python
        class Database:
            pass

        class UserService:
            def __init__(self, database):
                self.database = database

        container = Container()
        container.bind_singleton("database", Database)
        container.bind_type("userService", UserService)

        service = container.resolve("userService")
        ```
    """

    def __init__(self, parameter_names: ParameterNames | None = None):
        """
        Create an empty container.

        Args:
            parameter_names: Callable returning the ordered dependency names of
                a bound type. Defaults to constructor signature introspection.
        """
        self._registry = BindingRegistry()
        self._singletons = SingletonInstanceCache()
        self._parameter_names = parameter_names or default_parameter_names

    # Registration

    def bind_type(self, id: str, type_: type | Callable[..., Any]) -> BindingBuilder:
        """
        Bind ``type_`` to ``id``, creating a new instance on every resolution.

        Replaces any binding previously registered under ``id``.
        """
        return self._bind(id, type_, singleton=False)

    def bind_singleton(self, id: str, type_: type | Callable[..., Any]) -> BindingBuilder:
        """
        Bind ``type_`` to ``id`` as a singleton.

        Singleton bindings of the same type share one instance unless the
        returned builder's ``create_unique_instance`` is called.
        """
        return self._bind(id, type_, singleton=True)

    def _bind(self, id: str, type_: type | Callable[..., Any], singleton: bool) -> BindingBuilder:
        if not isinstance(id, str) or not id:
            raise ConfigurationError(f"Binding id must be a non-empty string, got {id!r}")
        if not callable(type_):
            raise ConfigurationError(f"Cannot bind '{id}' to non-constructible {type_!r}")

        binding = Binding(id, type_, singleton)
        self._registry.add(binding)
        logger.debug("Registered binding %s", binding)
        return BindingBuilder(self, binding)

    # Resolution

    def can_resolve(self, id: str) -> bool:
        """
        Check if ``id`` is directly bound or is the factory form of a bound id.

        Groups are not taken into account.
        """
        if id in self._registry:
            return True
        base_id = factory_base_id(id)
        return base_id is not None and base_id in self._registry

    def resolve(self, id: str) -> Any:
        """
        Resolve ``id`` to a value.

        Strategies, in order:
            1. a directly bound id is constructed (or taken from the singleton cache)
            2. ``<id>Factory`` (any case) of a bound id gives a factory callable
            3. a group id gives the list of its members, in registration order

        Raises:
            CircularDependencyError: If ``id`` depends on itself
            UnresolvedDependencyError: If no strategy applies
        """
        return self._resolve(id, [])

    def resolve_factory(self, id: str) -> Callable[..., Any]:
        """
        Get a factory callable for the binding registered under ``id``.

        Positional arguments passed to the factory fill the leading constructor
        parameters; the remaining ones are resolved from the container.
        """
        if id not in self._registry:
            raise UnresolvedDependencyError(id)
        return self._make_factory(id, [])

    def resolve_type(self, type_: Any) -> Any:
        """
        Resolve the first binding registered for ``type_``.

        If several ids are bound to the same type, which one wins is
        registration order and should not be relied upon.
        """
        if not callable(type_):
            raise InvalidTypeError(type_)

        binding = self._registry.first_of_type(type_)
        if binding is None:
            raise UnregisteredTypeError(type_)

        return self.resolve(binding.id)

    def find(self, id: str) -> Any | None:
        """Resolve ``id``, returning None if nothing is bound under it."""
        if not self.can_resolve(id) and not self._registry.by_group(id):
            return None
        return self.resolve(id)

    def run(self, func: Callable[..., Any]) -> Any:
        """
        Call ``func`` with its parameters resolved by name.

        Example:
            def main(userService, config):
                return userService.start(config)

            container.run(main)
        """
        arguments = [self.resolve(name) for name in self._parameter_names(func)]
        return func(*arguments)

    def _resolve(self, id: str, chain: list[str]) -> Any:
        if id in chain:
            raise CircularDependencyError([*chain, id])

        binding = self._registry.get(id)
        if binding is not None:
            return self._resolve_binding(binding, chain, ())

        base_id = factory_base_id(id)
        if base_id is not None and base_id in self._registry:
            return self._make_factory(base_id, chain)

        members = self._registry.by_group(id)
        if members:
            return [self._resolve(member.id, chain) for member in members]

        raise UnresolvedDependencyError(id, chain)

    def _resolve_binding(self, binding: Binding, chain: list[str], args: Sequence[Any]) -> Any:
        if binding.id in chain:
            raise CircularDependencyError([*chain, binding.id])

        chain.append(binding.id)
        try:
            if binding.singleton:
                return self._singletons.get_or_create(
                    binding.instance_key(), lambda: self._construct(binding, chain, args)
                )
            return self._construct(binding, chain, args)
        finally:
            chain.pop()

    def _construct(self, binding: Binding, chain: list[str], args: Sequence[Any]) -> Any:
        """Call the bound type with resolved dependencies followed by ``args``."""
        names = list(self._parameter_names(binding.type))[len(args) :]
        dependencies = [self._resolve(name, chain) for name in names]

        logger.debug("Constructing %s with dependencies %s", binding, names)
        return binding.type(*dependencies, *args)

    def _make_factory(self, id: str, chain: list[str]) -> Callable[..., Any]:
        def factory(*args: Any) -> Any:
            binding = self._registry.get(id)
            if binding is None:
                raise UnresolvedDependencyError(id, chain)
            return self._resolve_binding(binding, list(chain), args)

        factory.__name__ = f"{id}{FACTORY_SUFFIX}"
        factory.__qualname__ = factory.__name__
        return factory

    # Lifecycle

    def reset_saved_instances(self) -> None:
        """Forget every constructed singleton. Bindings are kept."""
        self._singletons.clear()

    def reset(self) -> None:
        """Remove every binding and every constructed singleton."""
        self._registry.clear()
        self._singletons.clear()

    @property
    def bindings(self) -> list[Binding]:
        """Registered bindings, in registration order."""
        return list(self._registry)

    def __contains__(self, id: object) -> bool:
        return isinstance(id, str) and self.can_resolve(id)

    def __iter__(self) -> Iterator[Binding]:
        return iter(self._registry)

    def __len__(self) -> int:
        return len(self._registry)
