"""
chibi-ioc - a minimal name-based dependency injection container.

This library provides:
- Fluent binding of ids to types, as plain or singleton bindings
- Constructor introspection to discover dependencies by parameter name
- Lazy recursive resolution with circular dependency detection
- Dependency groups and automatically generated factories
"""

from .bindings import FACTORY_SUFFIX, Binding
from .container import Container
from .core import BindingBuilder
from .errors import (
    CircularDependencyError,
    ConfigurationError,
    InvalidTypeError,
    IocError,
    UnregisteredTypeError,
    UnresolvedDependencyError,
)
from .introspection import SignatureIntrospector, parameter_names

__all__ = [
    "FACTORY_SUFFIX",
    "Binding",
    "BindingBuilder",
    "CircularDependencyError",
    "ConfigurationError",
    "Container",
    "InvalidTypeError",
    "IocError",
    "SignatureIntrospector",
    "UnregisteredTypeError",
    "UnresolvedDependencyError",
    "parameter_names",
]
