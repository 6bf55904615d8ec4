"""Singleton: a class with exactly one shared instance."""

from __future__ import annotations

_CONSTRUCTION_KEY = object()


class Singleton:
    """A class that can only be reached through get_instance()."""

    _instance: Singleton | None = None

    def __init__(self, *, _key: object = None) -> None:
        if _key is not _CONSTRUCTION_KEY:
            raise TypeError("use Singleton.get_instance() instead of calling Singleton()")
        self.calls = 0

    @staticmethod
    def get_instance() -> Singleton:
        """Return the one instance, creating it on first use."""
        if Singleton._instance is None:
            Singleton._instance = Singleton(_key=_CONSTRUCTION_KEY)
        return Singleton._instance

    def some_business_logic(self) -> int:
        """Run the instance's business logic and return how many times it has run."""
        self.calls += 1
        return self.calls

    def __copy__(self) -> Singleton:
        """Copying yields the one shared instance, never a second one."""
        return Singleton.get_instance()

    def __deepcopy__(self, memo: dict) -> Singleton:
        """Deep copying yields the one shared instance, never a second one."""
        instance = Singleton.get_instance()
        memo[id(self)] = instance
        return instance

    def __reduce__(self):
        """Unpickling resolves to the one shared instance."""
        return (Singleton.get_instance, ())