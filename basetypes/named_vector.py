"""A list of elements that can also be addressed by name."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Generic, TypeVar

__all__ = ["InvalidName", "NamedVector"]

T = TypeVar("T")


class InvalidName(LookupError):
    """Raised when an element is looked up by a name that does not exist."""

    def __init__(self, name: str):
        super().__init__(
            f"trying to access element {name}, "
            "but there is no element with that name on this structure"
        )
        self.name = name


@dataclass
class NamedVector(Generic[T]):
    """Elements stored together with the names that identify them.

    ``names[i]`` is the name of ``elements[i]``.
    """

    names: list[str] = field(default_factory=list)
    elements: list[T] = field(default_factory=list)
    element_factory: Callable[[], T] | None = field(
        default=None, repr=False, compare=False
    )

    def has_names(self) -> bool:
        """Return True if the names are filled in."""
        return bool(self.names) and bool(self.names[0])

    def element_by_name(self, name: str) -> T:
        return self.elements[self.index_of(name)]

    def index_of(self, name: str) -> int:
        """Return the index of ``name``; raise InvalidName if it is absent."""
        try:
            return self.names.index(name)
        except ValueError:
            raise InvalidName(name) from None

    def resize(self, size: int) -> None:
        """Truncate or pad both the names and the elements to ``size``."""
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        del self.elements[size:]
        del self.names[size:]
        factory = self.element_factory
        self.elements.extend(
            factory() if factory is not None else None
            for _ in range(size - len(self.elements))
        )
        self.names.extend("" for _ in range(size - len(self.names)))

    def clear(self) -> None:
        self.elements.clear()
        self.names.clear()

    def _resolve(self, key: str | int) -> int:
        if isinstance(key, str):
            return self.index_of(key)
        if not 0 <= key < len(self.elements):
            raise IndexError(f"index {key} out of range for {len(self.elements)} elements")
        return key

    def __getitem__(self, key: str | int) -> T:
        return self.elements[self._resolve(key)]

    def __setitem__(self, key: str | int, value: T) -> None:
        self.elements[self._resolve(key)] = value

    def __len__(self) -> int:
        return len(self.elements)