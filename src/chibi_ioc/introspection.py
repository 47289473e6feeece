"""
Signature introspection for extracting constructor dependency names.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


class SignatureIntrospector:
    """Extracts dependency names from class constructors and callables."""

    @staticmethod
    def extract_from_class(cls: type) -> list[str]:
        """
        Extract dependency names from a class constructor.

        A class that defines no ``__init__`` anywhere in its hierarchy has no
        dependencies. Inherited constructors are honoured.
        """
        if cls.__init__ is object.__init__:  # type: ignore[misc]
            return []
        return SignatureIntrospector.extract_from_callable(cls)

    @staticmethod
    def extract_from_callable(func: Callable[..., Any]) -> list[str]:
        """
        Extract dependency names from a callable's signature.

        Only parameters that can be passed positionally are reported, in
        declaration order. ``*args``, ``**kwargs`` and keyword-only parameters
        are skipped.
        """
        try:
            signature = inspect.signature(func)
        except (TypeError, ValueError):
            # builtins without signature metadata
            return []

        return [param.name for param in signature.parameters.values() if param.kind in _POSITIONAL_KINDS]


def parameter_names(target: type | Callable[..., Any]) -> list[str]:
    """Return the ordered dependency names declared by ``target``."""
    if inspect.isclass(target):
        return SignatureIntrospector.extract_from_class(target)
    return SignatureIntrospector.extract_from_callable(target)
