# domain/city.py
from typing import Any


class City:
    """
    Registry of the items visible on the grid.
    Vehicles stay registered for the whole run; passengers only while they wait.
    """

    def __init__(self, width: int = 35, height: int = 35):
        if width <= 0 or height <= 0:
            raise ValueError(f"city must have a positive size, got {width}x{height}")
        self.width = width
        self.height = height
        self._items: list[Any] = []

    def add_item(self, item: Any) -> None:
        if item is None:
            raise TypeError("item is None")
        if any(i is item for i in self._items):
            raise ValueError(f"{item} is already registered")
        self._items.append(item)

    def remove_item(self, item: Any) -> None:
        for i, it in enumerate(self._items):
            if it is item:
                del self._items[i]
                return
        raise ValueError(f"{item} is not registered")

    def items(self) -> tuple[Any, ...]:
        return tuple(self._items)

    def __contains__(self, item: Any) -> bool:
        return any(i is item for i in self._items)

    def __len__(self) -> int:
        return len(self._items)
