"""SceneGraph: finalized items in drawing order."""

from __future__ import annotations

from collections.abc import Iterator

from picscript.engine.items import Item


class SceneGraph:
    """Append-only sequence of resolved items, with the range of levels used."""

    def __init__(self) -> None:
        self._items: list[Item] = []
        self.min_level = 0
        self.max_level = 0

    def append(self, item: Item) -> None:
        self._items.append(item)

    def track_level(self, level: int) -> None:
        self.min_level = min(self.min_level, level)
        self.max_level = max(self.max_level, level)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Item:
        return self._items[index]

    @property
    def last(self) -> Item | None:
        return self._items[-1] if self._items else None
