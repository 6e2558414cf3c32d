"""Registry of named template functions."""
from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from .base import Function


class FunctionRegistry:
    """Registry for template functions.

    Functions can be registered with the decorator form, which instantiates
    the decorated class:

        registry = FunctionRegistry()

        @registry.register("shout")
        class Shout(Function[str]):
            ...

    or added as instances:

        registry.add("shout", Shout())
    """

    def __init__(self) -> None:
        self._functions: Dict[str, Function[Any]] = {}

    def register(self, name: str) -> Callable[[type], type]:
        """Decorator registering an instance of the decorated class under ``name``."""
        def decorator(cls: type) -> type:
            self._functions[name] = cls()
            return cls
        return decorator

    def add(self, name: str, function: Function[Any]) -> None:
        self._functions[name] = function

    def get(self, name: str) -> Optional[Function[Any]]:
        return self._functions.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self._functions

    def list_functions(self) -> List[str]:
        """Registered names in registration order."""
        return list(self._functions.keys())


__all__ = ["FunctionRegistry"]
