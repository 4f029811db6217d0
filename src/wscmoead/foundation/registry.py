"""
Generic registry pattern for named components (individual types, operators, stopping criteria).

Names are resolved once, when a configuration is turned into a running engine,
so an unknown name is reported before any evaluation happens.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

from .exceptions import InvalidOperatorError

T = TypeVar("T")


def suggest_names(name: str, options: Iterable[str]) -> list[str]:
    """Return up to three registered names close to ``name`` (case-insensitive)."""
    lookup = {option.lower(): option for option in options}
    if not name or not lookup:
        return []
    matches = get_close_matches(name.lower(), lookup.keys(), n=3, cutoff=0.6)
    return [lookup[match] for match in matches]


class Registry(Generic[T]):
    """
    A simple registry mapping names to component factories.

    Supports usage as a decorator:

        CROSSOVER = Registry("crossover operator")

        @CROSSOVER.register("indirect")
        class IndirectCrossover: ...
    """

    def __init__(self, name: str = "Registry") -> None:
        self._name = name
        self._items: dict[str, T] = {}

    @property
    def name(self) -> str:
        return self._name

    def register(self, key: str, item: T | None = None, *, override: bool = False) -> Callable[[T], T] | T:
        """
        Register an item with the given key.

        Can be used as a function call or a decorator.

        Args:
            key: The unique name for the item.
            item: The item to register. If None, returns a decorator.
            override: If True, overwrite existing key. If False, raise ValueError on duplicate.
        """

        def _do_register(obj: T) -> T:
            if key in self._items and not override:
                raise ValueError(f"Key '{key}' already exists in registry '{self._name}'")
            self._items[key] = obj
            return obj

        if item is None:
            return _do_register
        return _do_register(item)

    def unregister(self, key: str) -> None:
        self._items.pop(key, None)

    def get(self, key: str, default: Any = ...) -> T:
        """
        Retrieve an item by key.

        Raises InvalidOperatorError (with close-match suggestions) when the key
        is missing and no default is given.
        """
        if key not in self._items:
            if default is not ...:
                return default
            suggestions = suggest_names(key, self._items) or self.list()
            raise InvalidOperatorError(self._name, key, suggestions)
        return self._items[key]

    def list(self) -> list[str]:
        """Return a sorted list of registered keys."""
        return sorted(self._items.keys())

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __getitem__(self, key: str) -> T:
        return self.get(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


__all__ = ["Registry", "suggest_names"]
